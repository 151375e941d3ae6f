"""Allow ``python -m wakachi``."""

import sys

from wakachi.cli import main

sys.exit(main())
