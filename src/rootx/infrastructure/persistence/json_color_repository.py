"""JSON-file-backed implementation of ColorRepository."""

from __future__ import annotations

from pathlib import Path

from rootx.domain.model.color import Color
from rootx.domain.repository.color_repository import ColorRepository
from rootx.infrastructure.documents import color_from_document, color_to_document
from rootx.infrastructure.persistence.json_document_file import JsonDocumentFile


class JsonColorRepository(ColorRepository):

    def __init__(self, file_path: Path, timeout: float = 30.0) -> None:
        self._file = JsonDocumentFile(file_path, timeout)

    def list_all(self) -> list[Color]:
        colors = [color_from_document(doc) for doc in self._file.load()]
        return sorted(colors, key=lambda c: c.created_at, reverse=True)

    def save(self, color: Color) -> None:
        self._file.upsert(color_to_document(color))
