"""Application services: the color master list."""

from __future__ import annotations

from rootx.domain.model.color import Color
from rootx.domain.repository.color_repository import ColorRepository


class AddColorHandler:

    def __init__(self, color_repo: ColorRepository) -> None:
        self._color_repo = color_repo

    def handle(self, name: str | None, hex: str | None = None) -> Color:
        color = Color.create(name, hex)
        self._color_repo.save(color)
        return color


class ListColorsHandler:

    def __init__(self, color_repo: ColorRepository) -> None:
        self._color_repo = color_repo

    def handle(self) -> list[Color]:
        return sorted(self._color_repo.list_all(), key=lambda c: c.created_at, reverse=True)
