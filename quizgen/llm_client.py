"""
LLM Client module for interacting with the Google Gemini API.
Handles prompt sending, response text extraction, and error handling.
"""

from typing import Optional, Dict, Any
import logging
import os

import requests
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_TIMEOUT = 30.0


class UpstreamCallError(Exception):
    """Raised when the generative model could not be reached or answered with an error."""
    pass


class GeminiClient:
    """
    Thin client for the Gemini generateContent REST endpoint.

    Configuration falls back to the GEMINI_API_KEY, GEMINI_MODEL, GEMINI_API_URL
    and GEMINI_TIMEOUT environment variables. Calls are never retried.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.api_key = api_key if api_key is not None else os.getenv("GEMINI_API_KEY", "")
        self.model = model or os.getenv("GEMINI_MODEL", DEFAULT_MODEL)
        self.base_url = (base_url or os.getenv("GEMINI_API_URL", DEFAULT_BASE_URL)).rstrip("/")
        self.timeout = timeout if timeout is not None else float(os.getenv("GEMINI_TIMEOUT", DEFAULT_TIMEOUT))

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def _validate_config(self) -> None:
        """
        Validate that the required configuration is set.

        Raises:
            UpstreamCallError: If the API key is missing.
        """
        if not self.api_key:
            raise UpstreamCallError("GEMINI_API_KEY not found in environment variables")

    def _build_headers(self) -> Dict[str, str]:
        return {
            "x-goog-api-key": self.api_key,
            "Content-Type": "application/json",
        }

    @staticmethod
    def _extract_text(data: Dict[str, Any]) -> str:
        """
        Pull the generated text out of a generateContent response body.

        Args:
            data (Dict[str, Any]): Decoded JSON body returned by the API

        Returns:
            str: Concatenated text of the first candidate's parts

        Raises:
            UpstreamCallError: If the body has no usable candidate.
        """
        candidates = data.get("candidates") or []
        if not candidates:
            feedback = data.get("promptFeedback", {})
            raise UpstreamCallError(f"No candidates in Gemini response: {feedback}")
        try:
            parts = candidates[0]["content"]["parts"]
        except (KeyError, TypeError) as e:
            raise UpstreamCallError(f"Unexpected response structure: {e}")
        text = "".join(part.get("text", "") for part in parts)
        if not text:
            raise UpstreamCallError("No content found in response")
        return text

    def generate(self, prompt: str) -> str:
        """
        Send a prompt to Gemini and return the raw generated text.

        Args:
            prompt (str): The prompt text to send to the model.

        Returns:
            str: The generated text response.

        Raises:
            UpstreamCallError: If configuration is invalid, the request fails,
                or the response cannot be read.
        """
        self._validate_config()

        payload = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}
        logger.debug("Calling %s (%d prompt chars)", self.model, len(prompt))

        try:
            response = requests.post(
                self.endpoint,
                headers=self._build_headers(),
                json=payload,
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.HTTPError as e:
            body = e.response.text if e.response is not None else ""
            raise UpstreamCallError(f"Gemini API returned an error: {e} {body}".strip()) from e
        except requests.RequestException as e:
            raise UpstreamCallError(f"Gemini API unavailable: {e}") from e
        except ValueError as e:
            raise UpstreamCallError(f"Failed to parse API response: {e}") from e

        return self._extract_text(data)
