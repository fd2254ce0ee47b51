"""Configuration constants for toddlerwords application."""

import os

# Leveling criteria
ATTEMPT_WINDOW_SIZE = 10         # Number of recent attempts to consider
LEVEL_CHANGE_MIN_ATTEMPTS = 10   # Attempts required at a level before it can change
LEVEL_UP_ACCURACY = 0.8          # Accuracy at or above this moves up a grade
LEVEL_DOWN_ACCURACY = 0.5        # Accuracy below this moves down a grade

# Audio challenges show the word after this many misses
REVEAL_AFTER_WRONG_ATTEMPTS = 3

# Free typing
DISCOVERED_WORDS_LIMIT = 20      # Only the most recent discovered words are kept

# Pause after a correct answer before the next word
CELEBRATION_SECONDS = 1.5

# Dictionaries
SYSTEM_DICTIONARY_PATH = '/usr/share/dict/words'

# Sounds
DEFAULT_SOUND = 'Swoosh'
AVAILABLE_SOUNDS = ['Swoosh', 'Swish', 'Tri-Tone', 'Chime', 'Bell', 'Ding']

# Storage locations
DEFAULT_CONFIG_FILE = os.path.expanduser('~/.config/toddlerwords/config.json')
DEFAULT_SESSIONS_DIR = os.path.expanduser('~/Documents/toddlerwords/sessions')
