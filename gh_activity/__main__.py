"""Allow ``python -m gh_activity``."""

from __future__ import annotations

from gh_activity.cli import main

raise SystemExit(main())
