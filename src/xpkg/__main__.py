"""Allow ``python -m xpkg``."""

from __future__ import annotations

import sys

from xpkg.cli.main import main

sys.exit(main())
