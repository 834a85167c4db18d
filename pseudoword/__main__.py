"""Allow ``python -m pseudoword``."""

import sys

from pseudoword.cli import main

sys.exit(main())
