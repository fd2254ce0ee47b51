"""Abstract base classes for dependency injection."""

import random
from abc import ABC, abstractmethod


class RandomSource(ABC):
    """Abstract source of randomness for word selection."""

    @abstractmethod
    def pick_index(self, count: int) -> int:
        """Pick one of `count` positions. Returns an int in [0, count)."""
        pass


class SystemRandomSource(RandomSource):
    """RandomSource backed by the standard library generator."""

    def __init__(self, seed=None):
        self._random = random.Random(seed)

    def pick_index(self, count: int) -> int:
        return self._random.randrange(count)


class WordBankProvider(ABC):
    """Abstract base class for per-grade word banks."""

    @abstractmethod
    def words_for(self, level) -> list[str]:
        """Get the candidate words for a grade level. Returns [] if none."""
        pass


class Storage(ABC):
    """Abstract base class for config and session storage."""

    @abstractmethod
    def load_config(self):
        """Load user preferences. Returns an AppConfig (defaults on failure)."""
        pass

    @abstractmethod
    def save_config(self, config) -> None:
        """Save user preferences."""
        pass

    @abstractmethod
    def save_session(self, record) -> str:
        """Save a typing or challenge record. Returns the path written."""
        pass

    @abstractmethod
    def list_sessions(self, date: str = None) -> list:
        """List saved records (newest first) as ChallengeRecord/SessionRecord objects.
        Optionally only for one YYYY-MM-DD date; any other date value yields []."""
        pass
