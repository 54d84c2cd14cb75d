"""Complaint snapshot sources (retrieval boundary)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


class ComplaintSource:
    """Delivers the complete complaint collection as raw documents."""

    def fetch_documents(self) -> list[dict[str, Any]]:
        raise NotImplementedError


class JsonFileSource(ComplaintSource):
    """Reads a JSON export of the complaints collection.

    Accepted layouts: a list of documents, ``{"complaints": [...]}``, or an
    object mapping document ids to documents.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def fetch_documents(self) -> list[dict[str, Any]]:
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise RuntimeError(f"Failed to read complaints from {self.path}: {exc}") from exc
        if isinstance(payload, dict) and isinstance(payload.get("complaints"), list):
            payload = payload["complaints"]
        if isinstance(payload, dict):
            return [{"id": doc_id, **doc} for doc_id, doc in payload.items() if isinstance(doc, dict)]
        if isinstance(payload, list):
            return [doc for doc in payload if isinstance(doc, dict)]
        raise RuntimeError(f"Unexpected complaints payload type in {self.path}: {type(payload)!r}")
