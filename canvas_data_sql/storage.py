"""Storage-location hash generation for daily Canvas Data snapshots."""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from datetime import datetime
from typing import Protocol

import pytz

DEFAULT_HASH_TIMEZONE = "America/Los_Angeles"
DEFAULT_HASH_SALT = "canvas-data"
HASH_LENGTH = 32


class HashGenerator(Protocol):
    """Produce an opaque identifier used to namespace a snapshot's storage path."""

    def generate_hash(self) -> str:
        """Return the hash for the current run."""


def compute_daily_hash(partition_date: str, *, salt: str = DEFAULT_HASH_SALT) -> str:
    if not partition_date.strip():
        raise ValueError("partition_date must not be empty")
    digest = hashlib.sha256(f"{salt}:{partition_date}".encode("utf-8")).hexdigest()
    return digest[:HASH_LENGTH]


class DailyHashGenerator:
    """Hash that stays stable for a calendar day in the configured timezone."""

    def __init__(
        self,
        tz: str = DEFAULT_HASH_TIMEZONE,
        *,
        salt: str = DEFAULT_HASH_SALT,
        clock: Callable[[pytz.BaseTzInfo], datetime] | None = None,
    ) -> None:
        self.timezone = pytz.timezone(tz)
        self.salt = salt
        self._clock = clock or datetime.now

    def current_date_str(self) -> str:
        return self._clock(self.timezone).strftime("%Y-%m-%d")

    def generate_hash(self) -> str:
        return compute_daily_hash(self.current_date_str(), salt=self.salt)


class StaticHashGenerator:
    """Always return the same hash (reruns against a known snapshot)."""

    def __init__(self, value: str) -> None:
        if not value or not value.strip():
            raise ValueError("hash value must not be empty")
        self.value = value.strip()

    def generate_hash(self) -> str:
        return self.value
