"""
Hide the correct answer letter inside a longer random string.

This only keeps the answer out of plain sight in the response body; anyone
reading the 10th character of the key gets it back.
"""
import random
from typing import Optional

KEY_CHARSET = "ABCD"
PREFIX_LENGTH = 9
SUFFIX_LENGTH = 8
ANSWER_INDEX = PREFIX_LENGTH
KEY_LENGTH = PREFIX_LENGTH + 1 + SUFFIX_LENGTH


def _filler(length: int, rng: random.Random) -> str:
    return "".join(rng.choice(KEY_CHARSET) for _ in range(length))


def obfuscate_correct_option(correct_option: str, rng: Optional[random.Random] = None) -> str:
    """
    Build the obfuscated key for a correct option letter.

    Args:
        correct_option (str): One of "A", "B", "C", "D"
        rng (random.Random, optional): Source of the filler letters

    Returns:
        str: 18 characters over ABCD with correct_option at index 9
    """
    rng = rng or random
    return _filler(PREFIX_LENGTH, rng) + correct_option + _filler(SUFFIX_LENGTH, rng)


def decode_obfuscated_key(obfuscated_key: str) -> str:
    """Read the correct option letter back out of an obfuscated key."""
    return obfuscated_key[ANSWER_INDEX]
