"""Interactive narration of public GitHub user activity."""

from __future__ import annotations

from .config import ActivityClientConfig
from .errors import ActivityConfigError, ActivityError
from .narration import decode_event, iter_narration, narrate
from .shell import run_shell

__all__ = [
    "ActivityClientConfig",
    "ActivityConfigError",
    "ActivityError",
    "decode_event",
    "iter_narration",
    "narrate",
    "run_shell",
]
