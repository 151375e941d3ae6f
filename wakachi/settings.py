"""
Settings and configuration for Wakachi.

Values are read from the environment once, at import time.
"""

import os
from pathlib import Path

# Data directory paths
PACKAGE_DIR = Path(__file__).parent
DATA_DIR = PACKAGE_DIR / "data"

# Bundled sample dictionary
DEFAULT_DICT_PATH = DATA_DIR / "ja.json"

# Environment variable for a custom dictionary
DICT_PATH = Path(os.environ.get("WAKACHI_DICT_PATH", DEFAULT_DICT_PATH))

# Debug mode
DEBUG = os.environ.get("WAKACHI_DEBUG", "").lower() in ("1", "true", "yes")

# Log level used by the CLI
LOG_LEVEL = os.environ.get("WAKACHI_LOG_LEVEL", "DEBUG" if DEBUG else "WARNING").upper()
