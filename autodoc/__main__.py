"""Allow running autodoc with python -m autodoc."""

import sys

from autodoc.cli.cli import main

sys.exit(main())
