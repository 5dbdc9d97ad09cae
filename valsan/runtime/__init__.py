"""Runtime helpers: sync bridge and child scheduling."""

from .concurrency import gather_in_order, run_children
from .sync import STRICT_SYNC_ENV_VAR, call_blocking, run_sync, strict_sync_default

__all__ = [
    "STRICT_SYNC_ENV_VAR",
    "call_blocking",
    "gather_in_order",
    "run_children",
    "run_sync",
    "strict_sync_default",
]
