"""Gemini-backed multiple-choice quiz question generator."""
