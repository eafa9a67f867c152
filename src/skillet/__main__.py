"""Allow ``python -m skillet``."""

from __future__ import annotations

from skillet.cli.main import main

raise SystemExit(main())
