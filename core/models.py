"""Domain models for toddlerwords application."""

from datetime import datetime
from enum import Enum

from .config import (
    ATTEMPT_WINDOW_SIZE, LEVEL_CHANGE_MIN_ATTEMPTS,
    LEVEL_UP_ACCURACY, LEVEL_DOWN_ACCURACY,
    REVEAL_AFTER_WRONG_ATTEMPTS, DISCOVERED_WORDS_LIMIT,
    DEFAULT_SOUND, AVAILABLE_SOUNDS
)
from .grades import GradeLevel, DEFAULT_GRADE, successor, predecessor, parse_grade
from .interfaces import RandomSource, SystemRandomSource, WordBankProvider
from .segmentation import segment
from .utils import last_segment
from .vocabulary import Vocabulary


def _timestamp(now: datetime = None) -> str:
    return (now or datetime.now()).strftime('%Y-%m-%d %H:%M:%S')


class ChallengeMode(Enum):
    VISUAL = 'visual'
    AUDIO = 'audio'


class ChallengeState(Enum):
    AWAITING_INPUT = 'awaiting_input'
    CELEBRATING = 'celebrating'
    ENDED = 'ended'


class AttemptResult(Enum):
    CORRECT = 'correct'
    INCORRECT = 'incorrect'


class AttemptWindow:
    """Fixed-capacity ring of recent attempt outcomes (True = correct).

    Once full, each new attempt overwrites the oldest one.
    """

    def __init__(self, capacity: int = ATTEMPT_WINDOW_SIZE):
        self.capacity = capacity
        self._slots = [False] * capacity
        self._head = 0   # next slot to write
        self._count = 0

    def record(self, correct: bool) -> None:
        self._slots[self._head] = bool(correct)
        self._head = (self._head + 1) % self.capacity
        self._count = min(self._count + 1, self.capacity)

    def __len__(self) -> int:
        return self._count

    def is_full(self) -> bool:
        return self._count == self.capacity

    def correct_count(self) -> int:
        return sum(1 for c in self._slots[:self._count] if c)

    def accuracy(self) -> float:
        """Fraction of correct attempts. 1.0 when nothing has been recorded."""
        if self._count == 0:
            return 1.0
        return self.correct_count() / self._count

    def to_list(self) -> list[bool]:
        """Outcomes oldest first."""
        if not self.is_full():
            return self._slots[:self._count]
        return self._slots[self._head:] + self._slots[:self._head]


class ChallengeRecord:
    """Summary of a finished word challenge, handed to storage."""

    kind = 'challenge'

    def __init__(self, grade_level: GradeLevel, score: int, words_completed: int,
                 mode: ChallengeMode = ChallengeMode.VISUAL, timestamp: str = None):
        self.timestamp = timestamp or _timestamp()
        self.grade_level = grade_level
        self.score = score
        self.words_completed = words_completed
        self.mode = mode

    def to_dict(self) -> dict:
        return {
            'kind': self.kind,
            'timestamp': self.timestamp,
            'grade_level': self.grade_level.value,
            'score': self.score,
            'words_completed': self.words_completed,
            'mode': self.mode.value
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'ChallengeRecord':
        return cls(
            parse_grade(data.get('grade_level', '')) or DEFAULT_GRADE,
            data.get('score', 0),
            data.get('words_completed', 0),
            ChallengeMode(data.get('mode', ChallengeMode.VISUAL.value)),
            data.get('timestamp')
        )


class SessionRecord:
    """A free-typing session: everything typed and the words found in it."""

    kind = 'session'

    def __init__(self, typed_text: str, discovered_words: list[str],
                 timestamp: str = None, duration_seconds: int | None = None):
        self.timestamp = timestamp or _timestamp()
        self.typed_text = typed_text
        self.discovered_words = list(discovered_words)
        self.duration_seconds = duration_seconds

    def to_dict(self) -> dict:
        return {
            'kind': self.kind,
            'timestamp': self.timestamp,
            'typed_text': self.typed_text,
            'discovered_words': self.discovered_words,
            'duration_seconds': self.duration_seconds
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'SessionRecord':
        return cls(
            data.get('typed_text', ''),
            data.get('discovered_words', []),
            data.get('timestamp'),
            data.get('duration_seconds')
        )


class AppConfig:
    """User preferences persisted between runs."""

    def __init__(self, selected_sound: str = DEFAULT_SOUND,
                 last_selected_grade: GradeLevel = DEFAULT_GRADE,
                 use_uppercase: bool = True):
        self.selected_sound = selected_sound if selected_sound in AVAILABLE_SOUNDS else DEFAULT_SOUND
        self.last_selected_grade = last_selected_grade
        self.use_uppercase = use_uppercase

    def to_dict(self) -> dict:
        return {
            'selected_sound': self.selected_sound,
            'last_selected_grade': self.last_selected_grade.value,
            'use_uppercase': self.use_uppercase
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'AppConfig':
        grade = parse_grade(str(data.get('last_selected_grade', ''))) or DEFAULT_GRADE
        use_uppercase = data.get('use_uppercase', True)
        if not isinstance(use_uppercase, bool):
            use_uppercase = True
        return cls(data.get('selected_sound', DEFAULT_SOUND), grade, use_uppercase)


class ChallengeSession:
    """Adaptive word quiz.

    One target word at a time is drawn from the current grade's bank. The
    player types letters and checks the attempt; a correct answer starts a
    celebration pause, and finishing the celebration may move the grade up
    or down based on the last ATTEMPT_WINDOW_SIZE attempts.

    Every mutation is a no-op once the session has ended, so callers can
    forward UI events without guarding state.
    """

    def __init__(self, mode: ChallengeMode, level: GradeLevel, word_bank: WordBankProvider,
                 rng: RandomSource = None):
        self.mode = mode
        self.level = level
        self.word_bank = word_bank
        self.rng = rng or SystemRandomSource()
        self.words = word_bank.words_for(level)
        self.target_word = ''
        self.typed_letters = []
        self.score = 0
        self.words_completed = 0
        self.recent_attempts = AttemptWindow()
        self.attempts_since_level_change = 0
        self.wrong_attempts_for_current_word = 0
        self.completed_words = set()
        self.is_celebrating = False
        self.is_ended = False

    @classmethod
    def start(cls, mode: ChallengeMode, initial_level: GradeLevel, word_bank: WordBankProvider,
              rng: RandomSource = None) -> 'ChallengeSession | None':
        """Start a challenge. Returns None if the grade has no words."""
        if not word_bank.words_for(initial_level):
            return None
        session = cls(mode, initial_level, word_bank, rng)
        session.select_next_word()
        return session

    @property
    def state(self) -> ChallengeState:
        if self.is_ended:
            return ChallengeState.ENDED
        if self.is_celebrating:
            return ChallengeState.CELEBRATING
        return ChallengeState.AWAITING_INPUT

    @property
    def typed_text(self) -> str:
        return ''.join(self.typed_letters).lower()

    @property
    def accuracy(self) -> float:
        return self.recent_attempts.accuracy()

    def select_next_word(self) -> str | None:
        """Draw a word not yet completed at this bank.

        When every word has been completed the completed set is cleared
        and the whole bank is eligible again. Returns the new target, or
        None (state unchanged) for an ended session or an empty bank.
        """
        if self.is_ended or not self.words:
            return None
        candidates = [w for w in self.words if w not in self.completed_words]
        if not candidates:
            self.completed_words.clear()
            candidates = list(self.words)
        self.target_word = candidates[self.rng.pick_index(len(candidates))]
        self.typed_letters = []
        self.wrong_attempts_for_current_word = 0
        return self.target_word

    def add_letter(self, letter: str) -> bool:
        if self.is_ended or self.is_celebrating or not letter:
            return False
        self.typed_letters.append(letter)
        return True

    def remove_last_letter(self) -> bool:
        if self.is_ended or self.is_celebrating or not self.typed_letters:
            return False
        self.typed_letters.pop()
        return True

    def clear_typed(self) -> None:
        if self.is_ended or self.is_celebrating:
            return
        self.typed_letters = []

    def is_complete_length(self) -> bool:
        """True when as many letters are typed as the target word has."""
        return bool(self.target_word) and len(self.typed_text) == len(self.target_word)

    def check_attempt(self) -> AttemptResult | None:
        """Score the typed letters against the target word.

        Returns None when input is not being accepted (celebrating or ended).
        """
        if self.is_ended or self.is_celebrating:
            return None
        if self.typed_text == self.target_word.lower():
            self.score += 1
            self.words_completed += 1
            self._record_attempt(True)
            self.completed_words.add(self.target_word)
            self.is_celebrating = True
            return AttemptResult.CORRECT
        self._record_attempt(False)
        self.wrong_attempts_for_current_word += 1
        return AttemptResult.INCORRECT

    def _record_attempt(self, correct: bool) -> None:
        self.recent_attempts.record(correct)
        self.attempts_since_level_change += 1

    def should_reveal_word(self) -> bool:
        return (self.mode == ChallengeMode.AUDIO
                and self.wrong_attempts_for_current_word >= REVEAL_AFTER_WRONG_ATTEMPTS)

    def is_word_visible(self) -> bool:
        return self.mode == ChallengeMode.VISUAL or self.should_reveal_word()

    def _can_change_level(self) -> bool:
        return (self.recent_attempts.is_full()
                and self.attempts_since_level_change >= LEVEL_CHANGE_MIN_ATTEMPTS)

    def should_level_up(self) -> bool:
        return self._can_change_level() and self.accuracy >= LEVEL_UP_ACCURACY

    def should_level_down(self) -> bool:
        return self._can_change_level() and self.accuracy < LEVEL_DOWN_ACCURACY

    def _change_level(self, new_level: GradeLevel | None) -> GradeLevel | None:
        """Move to new_level and swap in its bank.

        Counters only reset on an actual move; a missing target level or
        one without words leaves everything as it was.
        """
        if self.is_ended or new_level is None:
            return None
        words = self.word_bank.words_for(new_level)
        if not words:
            return None
        self.level = new_level
        self.words = words
        self.completed_words.clear()
        self.attempts_since_level_change = 0
        if not self.is_celebrating:
            self.select_next_word()
        return new_level

    def level_up(self) -> GradeLevel | None:
        """Move one grade up. Returns the new grade or None at the top."""
        return self._change_level(successor(self.level))

    def level_down(self) -> GradeLevel | None:
        """Move one grade down. Returns the new grade or None at the bottom."""
        return self._change_level(predecessor(self.level))

    def finish_celebration(self) -> GradeLevel | None:
        """End the celebration pause, apply leveling and pick the next word.

        Returns the new grade if the level changed.
        """
        if self.is_ended or not self.is_celebrating:
            return None
        new_level = None
        if self.should_level_up():
            new_level = self.level_up()
        elif self.should_level_down():
            new_level = self.level_down()
        self.is_celebrating = False
        self.select_next_word()
        return new_level

    def end(self) -> ChallengeRecord | None:
        """Close the session. Returns its record the first time only."""
        if self.is_ended:
            return None
        self.is_ended = True
        self.is_celebrating = False
        return ChallengeRecord(self.level, self.score, self.words_completed, self.mode)

    def to_dict(self) -> dict:
        visible = self.is_word_visible()
        return {
            'mode': self.mode.value,
            'state': self.state.value,
            'grade_level': self.level.value,
            'grade_name': self.level.display_name,
            'target_word': self.target_word if visible else None,
            'word_length': len(self.target_word),
            'word_visible': visible,
            'typed_text': self.typed_text,
            'score': self.score,
            'words_completed': self.words_completed,
            'accuracy': round(self.accuracy, 2),
            'recent_attempts': self.recent_attempts.to_list(),
            'is_celebrating': self.is_celebrating,
            'is_ended': self.is_ended,
            'should_reveal_word': self.should_reveal_word()
        }


class TypingSession:
    """Free typing: letters go in, words found between spaces come out."""

    def __init__(self, vocabulary: Vocabulary):
        self.vocabulary = vocabulary
        self.letters = []
        self.discovered_words = []
        self.started_at = datetime.now()

    @property
    def typed_text(self) -> str:
        return ''.join(self.letters)

    def add_character(self, character: str) -> bool:
        """Add one letter (stored upper-case) or digit. Anything else is ignored."""
        if len(character) != 1:
            return False
        if character.isalpha():
            self.letters.append(character.upper())
            return True
        if character.isdigit():
            self.letters.append(character)
            return True
        return False

    def add_space(self) -> list[str]:
        """Check the word just typed, then add a space. Returns words found."""
        found = self.check_and_save_word()
        self.letters.append(' ')
        return found

    def backspace(self) -> bool:
        if not self.letters:
            return False
        self.letters.pop()
        return True

    def check_and_save_word(self) -> list[str]:
        """Segment the text since the last space and keep the words found."""
        current = last_segment(self.typed_text)
        if not current.strip():
            return []
        found = segment(current, self.vocabulary)
        self.discovered_words.extend(found)
        if len(self.discovered_words) > DISCOVERED_WORDS_LIMIT:
            self.discovered_words = self.discovered_words[-DISCOVERED_WORDS_LIMIT:]
        return found

    def finish(self) -> SessionRecord | None:
        """Wrap up the session and clear it.

        Returns a record when anything was typed, else None.
        """
        record = None
        if self.letters:
            self.check_and_save_word()
            elapsed = int((datetime.now() - self.started_at).total_seconds())
            record = SessionRecord(self.typed_text, self.discovered_words,
                                   duration_seconds=elapsed)
        self.letters = []
        self.discovered_words = []
        self.started_at = datetime.now()
        return record

    def to_dict(self) -> dict:
        return {
            'typed_text': self.typed_text,
            'discovered_words': list(self.discovered_words)
        }


RECORD_TYPES = {
    ChallengeRecord.kind: ChallengeRecord,
    SessionRecord.kind: SessionRecord,
}


def record_from_dict(data: dict) -> 'ChallengeRecord | SessionRecord':
    """Load a saved record by its 'kind'. Raises ValueError for unknown kinds."""
    record_type = RECORD_TYPES.get(data.get('kind'))
    if record_type is None:
        raise ValueError(f"Unknown record kind: {data.get('kind')!r}")
    return record_type.from_dict(data)
