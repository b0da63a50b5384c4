"""Allow ``python -m bingo_referee``."""

import sys

from .cli import main

sys.exit(main())
