"""Shared file handling for the JSON-backed repositories.

Each repository keeps one JSON array of records in its own file and
rewrites the whole file on every write.
"""

from __future__ import annotations

import json
from pathlib import Path


class JsonFileRepository:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")

    @staticmethod
    def _index_of(records: list[dict], key: str, value: str) -> int | None:
        for i, raw in enumerate(records):
            if raw[key] == value:
                return i
        return None
