"""Find dictionary words inside unbroken runs of letters."""

from .utils import clean_letters
from .vocabulary import Vocabulary


def segment(text: str, vocabulary: Vocabulary) -> list[str]:
    """Split text into known words, left to right.

    Non-letters are dropped and case is ignored. At each position the
    longest known word wins; if no word starts there, that character is
    skipped. Repeated words are kept, e.g. "catcat" -> ["cat", "cat"].
    """
    cleaned = clean_letters(text)
    found = []
    start = 0
    while start < len(cleaned):
        longest = min(len(cleaned), start + vocabulary.max_word_length)
        for end in range(longest, start, -1):
            candidate = cleaned[start:end]
            if vocabulary.is_member(candidate):
                found.append(candidate)
                start = end
                break
        else:
            start += 1
    return found
