"""Grade ladder: the ordered difficulty levels for word challenges."""

from enum import Enum


class GradeLevel(Enum):
    PRE_K = 'prek'
    KINDERGARTEN = 'k'
    FIRST = '1'
    SECOND = '2'
    THIRD = '3'
    FOURTH = '4'
    FIFTH = '5'
    SIXTH = '6'

    @property
    def display_name(self) -> str:
        return DISPLAY_NAMES[self]

    @property
    def short_name(self) -> str:
        return SHORT_NAMES[self]


# Declaration order is the ladder order
GRADE_ORDER = list(GradeLevel)

DEFAULT_GRADE = GradeLevel.PRE_K

DISPLAY_NAMES = {
    GradeLevel.PRE_K: 'Pre-K',
    GradeLevel.KINDERGARTEN: 'Kindergarten',
    GradeLevel.FIRST: '1st Grade',
    GradeLevel.SECOND: '2nd Grade',
    GradeLevel.THIRD: '3rd Grade',
    GradeLevel.FOURTH: '4th Grade',
    GradeLevel.FIFTH: '5th Grade',
    GradeLevel.SIXTH: '6th Grade',
}

SHORT_NAMES = {
    GradeLevel.PRE_K: 'Pre-K',
    GradeLevel.KINDERGARTEN: 'K',
    GradeLevel.FIRST: '1st',
    GradeLevel.SECOND: '2nd',
    GradeLevel.THIRD: '3rd',
    GradeLevel.FOURTH: '4th',
    GradeLevel.FIFTH: '5th',
    GradeLevel.SIXTH: '6th',
}


def successor(level: GradeLevel) -> GradeLevel | None:
    """Get the next grade up, or None at the top of the ladder."""
    index = GRADE_ORDER.index(level) + 1
    if index >= len(GRADE_ORDER):
        return None
    return GRADE_ORDER[index]


def predecessor(level: GradeLevel) -> GradeLevel | None:
    """Get the next grade down, or None at the bottom of the ladder."""
    index = GRADE_ORDER.index(level) - 1
    if index < 0:
        return None
    return GRADE_ORDER[index]


def parse_grade(value: str) -> GradeLevel | None:
    """Look up a grade by key, short name or display name (case-insensitive)."""
    if not value:
        return None
    wanted = value.strip().lower()
    for level in GRADE_ORDER:
        if wanted in (level.value, level.short_name.lower(), level.display_name.lower(),
                      level.name.lower()):
            return level
    return None
