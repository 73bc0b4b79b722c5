"""
Settings and configuration for lkchecker.

Values are read once from the environment at import time.
"""

import os
from pathlib import Path
from typing import Optional

# Default lexicon path, used when the loader is called without one
_dictionary_env = os.environ.get("LK_DICTIONARY")
DICTIONARY_PATH: Optional[Path] = Path(_dictionary_env) if _dictionary_env else None

# Debug mode
DEBUG = os.environ.get("LKCHECKER_DEBUG", "").lower() in ("1", "true", "yes")

# Upper bound (UTF-8 bytes) for any word produced by a transform
MAX_WORD_LENGTH = 256

# Upper bound (UTF-8 bytes) for a single lexicon line
MAX_LINE_LENGTH = 4096

# Vowel that receives the stress when no position is given (0-based)
STRESS_DEFAULT = 1

# A next word starting with one of these ends a sentence
SENTENCE_FINAL = ".!?;"

# Separates plain suggestions from ablaut corrections
SUGGESTION_SEPARATOR = "-"
