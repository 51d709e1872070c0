"""Data model for created matches."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class Match:
    """Match record. player1/player2 ordering carries no meaning."""

    id: UUID
    player1: UUID
    player2: UUID

    def __post_init__(self) -> None:
        if self.player1 == self.player2:
            raise ValueError(f"Match {self.id} cannot pair {self.player1} with itself")

    @property
    def participants(self) -> frozenset[UUID]:
        return frozenset((self.player1, self.player2))
