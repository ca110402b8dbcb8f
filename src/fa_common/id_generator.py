"""Business number generator: AUC-20261018-001, BID-20261018-042, SET-...

Numbers are sequential per (prefix, UTC day) and restart at 001 every day.
Single-process only; counters live in memory.
"""

import threading
import uuid
from collections import defaultdict
from datetime import datetime

from src.fa_common.datetime_utils import utc_now, yyyymmdd


class BusinessNumberGenerator:
    def __init__(self) -> None:
        self._counters: dict[tuple[str, str], int] = defaultdict(int)
        self._lock = threading.Lock()

    def next_number(self, prefix: str, at: datetime | None = None) -> str:
        day = yyyymmdd(at or utc_now())
        with self._lock:
            self._counters[(prefix, day)] += 1
            seq = self._counters[(prefix, day)]
        return f"{prefix}-{day}-{seq:03d}"

    def reset(self) -> None:
        with self._lock:
            self._counters.clear()


_default_generator = BusinessNumberGenerator()


def next_business_number(prefix: str, at: datetime | None = None) -> str:
    """Generate the next business number using the module-level default generator."""
    return _default_generator.next_number(prefix, at)


def reset_business_numbers() -> None:
    _default_generator.reset()


def generate_id() -> str:
    """Opaque unique id for entities (lots, auctions, settlements)."""
    return uuid.uuid4().hex
