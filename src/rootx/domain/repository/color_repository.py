"""Abstract repository for the color master list."""

from __future__ import annotations

from abc import ABC, abstractmethod

from rootx.domain.model.color import Color


class ColorRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Color]:
        """Return every color, newest first."""

    @abstractmethod
    def save(self, color: Color) -> None:
        """Persist a new or updated color."""
