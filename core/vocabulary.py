"""Known-word store used to recognise words in free typing."""

import logging
import os

from .config import SYSTEM_DICTIONARY_PATH

logger = logging.getLogger(__name__)

# Curated toddler-friendly words, always available
TODDLER_WORDS = """
# people
mom dad mama papa baby boy girl man men woman kid kids friend nana papa grandma grandpa
brother sister aunt uncle me you we he she it they i my mine your our us him her them

# animals
cat cats kitten dog dogs puppy pup bird fish cow pig hen duck horse sheep goat lamb
frog bear lion tiger zebra monkey mouse rat bat bee bug ant fox owl elephant giraffe
snake turtle rabbit bunny deer wolf seal whale shark crab worm chick goose moose

# things
ball car bus truck train boat plane bike toy toys doll book cup bowl spoon fork plate
hat cap shoe shoes sock socks coat shirt dress bed chair door box bag key drum bell
house home park tree flower sun moon star stars sky rain snow cloud wind water sand
rock hill sea lake pond road farm zoo shop school room bath tub towel soap brush
apple banana milk juice egg eggs bread cake pie jam cookie candy corn pea peas bean
nut nuts rice soup pizza cheese grape grapes pear peach plum lemon orange berry

# body
eye eyes ear ears nose mouth hand hands foot feet leg legs arm arms head hair toe
toes knee chin lip lips tooth teeth tummy back

# actions
run ran go went come came see saw look jump hop sit stand eat ate drink play
sleep nap walk ride read sing dance swim fly kiss hug help make made get got give
take put push pull open shut stop wash wave clap kick throw catch find like love
want have has had is am are was be do did can will say said tell talk

# describing
big little small tall short hot cold wet dry good bad happy sad mad fun new old
red blue green yellow pink purple black white brown gray orange gold
up down in out on off over under into the a an and or but not no yes this that
here there all some more one two three four five six seven eight nine ten

# compound friendly
sunflower flower sunshine rainbow cupcake pancake snowman snowball football
butterfly ladybug starfish doghouse bedroom bathroom playground popcorn
"""


def parse_word_list(content: str) -> set[str]:
    """Parse whitespace-separated words, skipping # comment lines."""
    words = set()
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        for word in line.split():
            words.add(word.lower())
    return words


def load_system_words(path: str) -> set[str]:
    """Load an optional system word list (one word per line).

    Only words made entirely of letters are kept. A missing or unreadable
    file yields an empty set.
    """
    if not path or not os.path.exists(path):
        logger.info(f"System dictionary not found at {path}, using curated words only")
        return set()
    words = set()
    try:
        with open(path, 'r', encoding='utf-8', errors='ignore') as f:
            for line in f:
                word = line.strip().lower()
                if word and word.isalpha():
                    words.add(word)
    except OSError as e:
        logger.info(f"System dictionary unreadable at {path} ({e}), using curated words only")
        return set()
    return words


class Vocabulary:
    """Immutable two-tier set of known words.

    The curated tier comes from TODDLER_WORDS (or the given words); the
    general tier is an optional larger dictionary.
    """

    def __init__(self, curated_words=None, general_words=None):
        if curated_words is None:
            curated_words = parse_word_list(TODDLER_WORDS)
        self._curated_words = frozenset(w.lower() for w in curated_words if w)
        self._general_words = frozenset(w.lower() for w in (general_words or ()) if w)
        self._max_word_length = max((len(w) for w in self._curated_words | self._general_words),
                                    default=0)

    @classmethod
    def load(cls, system_path: str | None = SYSTEM_DICTIONARY_PATH) -> 'Vocabulary':
        """Build the store from the bundled list plus the system dictionary."""
        general = load_system_words(system_path) if system_path else set()
        vocabulary = cls(general_words=general)
        logger.info(
            f"Vocabulary loaded: {len(vocabulary.curated_words)} curated, "
            f"{len(vocabulary.general_words)} general words"
        )
        return vocabulary

    @property
    def curated_words(self) -> frozenset:
        return self._curated_words

    @property
    def max_word_length(self) -> int:
        """Length of the longest known word."""
        return self._max_word_length

    @property
    def general_words(self) -> frozenset:
        return self._general_words

    def is_member(self, word: str) -> bool:
        """Check if a word is known (case-insensitive). Empty strings never are."""
        if not word:
            return False
        word = word.lower()
        return word in self._curated_words or word in self._general_words

