"""Action value object."""

from __future__ import annotations

from dataclasses import dataclass

from chesswalk.core.position import Position


@dataclass(frozen=True, slots=True)
class Action:
    """Relocation of the acting piece on *source* to *destination*."""

    source: Position
    destination: Position

    def __str__(self) -> str:
        return f"{self.source} -> {self.destination}"
