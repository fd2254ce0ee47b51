"""Utility functions for toddlerwords application."""


def clean_letters(text: str) -> str:
    """Keep only alphabetic characters, lower-cased."""
    return ''.join(c for c in text.lower() if c.isalpha())


def last_segment(text: str) -> str:
    """Return the text typed since the last space."""
    return text[text.rfind(' ') + 1:]


def format_typed(text: str, use_uppercase: bool = True) -> str:
    """Format typed letters for display."""
    return text.upper() if use_uppercase else text.lower()
