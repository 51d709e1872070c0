"""Data model for registered player profiles."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class Profile:
    """Player profile record."""

    id: UUID
    name: str
