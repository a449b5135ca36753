"""Allow ``python -m pi.prompt``."""

import sys

from pi.prompt.cli import main

sys.exit(main())
