"""Helper functions for parsing LLM question responses"""
from typing import Dict, Any
import json
import re

from quizgen.obfuscation import obfuscate_correct_option, KEY_CHARSET

CODE_FENCE_RE = re.compile(r"```json|```")
VALID_OPTIONS = tuple(KEY_CHARSET)


class UpstreamParseError(Exception):
    """Exception raised when the model reply cannot be used as a question"""

    def __init__(self, message: str, raw: str):
        super().__init__(message)
        self.raw = raw


def strip_code_fences(text: str) -> str:
    """Remove markdown code fence markers and surrounding whitespace"""
    return CODE_FENCE_RE.sub("", text).strip()


def parse_question_response(raw_text: str) -> Dict[str, Any]:
    """Parse the model reply into a question dict, still holding correct_option"""
    text = strip_code_fences(raw_text)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise UpstreamParseError(f"not valid JSON: {e}", raw=text)

    if not isinstance(data, dict):
        raise UpstreamParseError("valid JSON but not a question object", raw=text)

    correct_option = data.get("correct_option")
    if correct_option not in VALID_OPTIONS:
        raise UpstreamParseError(f"valid JSON but correct_option is missing or not A-D: {correct_option!r}", raw=text)

    return data


def parse_and_obfuscate(raw_text: str) -> Dict[str, Any]:
    """
    Parse a question from the model reply and hide its answer.

    The correct_option field is replaced by obfuscated_key; every other field
    the model returned is passed through unchanged.
    """
    data = parse_question_response(raw_text)
    data["obfuscated_key"] = obfuscate_correct_option(data.pop("correct_option"))
    return data
