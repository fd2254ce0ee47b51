from .models import (
    AttemptWindow, AttemptResult, ChallengeMode, ChallengeState, ChallengeSession,
    ChallengeRecord, SessionRecord, TypingSession, AppConfig
)
from .interfaces import RandomSource, SystemRandomSource, WordBankProvider, Storage
from .grades import GradeLevel, GRADE_ORDER, successor, predecessor, parse_grade
from .vocabulary import Vocabulary
from .segmentation import segment
from .word_lists import StaticWordBank
from .utils import clean_letters, last_segment

__all__ = [
    'AttemptWindow', 'AttemptResult', 'ChallengeMode', 'ChallengeState', 'ChallengeSession',
    'ChallengeRecord', 'SessionRecord', 'TypingSession', 'AppConfig',
    'RandomSource', 'SystemRandomSource', 'WordBankProvider', 'Storage',
    'GradeLevel', 'GRADE_ORDER', 'successor', 'predecessor', 'parse_grade',
    'Vocabulary', 'segment', 'StaticWordBank',
    'clean_letters', 'last_segment'
]
