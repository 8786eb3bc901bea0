"""Allow ``python -m diagmarkup``."""

import sys

from diagmarkup.cli import main

sys.exit(main())
