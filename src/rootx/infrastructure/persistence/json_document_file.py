"""A JSON array of documents on disk, guarded for read-modify-write.

Every I/O or decoding failure surfaces as StoreError.  Waiting for the
lock is bounded by ``timeout`` seconds.
"""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from rootx.domain.exceptions import StoreError

logger = logging.getLogger(__name__)

Document = dict[str, Any]


class JsonDocumentFile:

    def __init__(self, file_path: Path, timeout: float = 30.0) -> None:
        self._file_path = file_path
        self._timeout = timeout
        self._lock = threading.RLock()
        with self._locked():
            self._ensure_file()

    @property
    def path(self) -> Path:
        return self._file_path

    def load(self) -> list[Document]:
        with self._locked():
            return self._read()

    def find(self, predicate: Callable[[Document], bool]) -> Document | None:
        for doc in self.load():
            if predicate(doc):
                return doc
        return None

    def upsert(self, doc: Document) -> None:
        """Replace the document with the same ``_id``, otherwise append."""
        with self._locked():
            docs = self._read()
            for i, existing in enumerate(docs):
                if existing["_id"] == doc["_id"]:
                    docs[i] = doc
                    break
            else:
                docs.append(doc)
            self._write(docs)

    def insert_unless(
        self, doc: Document, conflicts: Callable[[Document], bool]
    ) -> bool:
        """Append ``doc`` unless a stored document matches ``conflicts``.

        The check and the write share one lock hold.  Returns False when
        nothing was written.
        """
        with self._locked():
            docs = self._read()
            if any(conflicts(existing) for existing in docs):
                return False
            docs.append(doc)
            self._write(docs)
            return True

    def remove(self, doc_id: str) -> None:
        with self._locked():
            docs = self._read()
            kept = [d for d in docs if d["_id"] != doc_id]
            if len(kept) != len(docs):
                self._write(kept)

    # --- File helpers ---------------------------------------------------------

    @contextmanager
    def _locked(self) -> Iterator[None]:
        if not self._lock.acquire(timeout=self._timeout):
            raise StoreError(f"Timed out waiting for {self._file_path.name}")
        try:
            yield
        finally:
            self._lock.release()

    def _read(self) -> list[Document]:
        try:
            docs = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.error("Cannot read %s: %s", self._file_path, exc)
            raise StoreError(f"Cannot read {self._file_path.name}") from exc
        if not isinstance(docs, list):
            raise StoreError(f"{self._file_path.name} does not hold a JSON array")
        return docs

    def _write(self, docs: list[Document]) -> None:
        # atomic replace
        tmp_path = self._file_path.with_suffix(self._file_path.suffix + ".tmp")
        try:
            tmp_path.write_text(json.dumps(docs, indent=2) + "\n", encoding="utf-8")
            tmp_path.replace(self._file_path)
        except OSError as exc:
            logger.error("Cannot write %s: %s", self._file_path, exc)
            raise StoreError(f"Cannot write {self._file_path.name}") from exc

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            raise StoreError(f"Cannot create {self._file_path.name}") from exc
