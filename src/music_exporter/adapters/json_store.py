"""JSON file implementation of the catalog store."""

from __future__ import annotations

import os
import tempfile
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import TypeAdapter, ValidationError

from music_exporter.domain.errors import MusicExporterError, ParseError
from music_exporter.domain.model import MusicRecord

if TYPE_CHECKING:
    from collections.abc import Sequence

log = getLogger(__name__)

_CATALOG = TypeAdapter(list[MusicRecord])
JSON_INDENT = 4


class JsonCatalogStore:
    """Keep the catalog as a pretty-printed JSON array of records."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def read(self) -> list[MusicRecord]:
        if not self.path.exists():
            log.info(f"No catalog at {self.path}, starting from an empty one")
            return []
        try:
            content = self.path.read_bytes()
        except OSError as exc:
            raise MusicExporterError(f"Failed to read catalog {self.path}", cause=exc) from exc
        if not content.strip():
            return []
        try:
            records = _CATALOG.validate_json(content)
        except ValidationError as exc:
            raise ParseError(f"Catalog {self.path} is not a valid music list", cause=exc) from exc
        log.info(f"Loaded {len(records)} items from {self.path}")
        return records

    def write(self, records: Sequence[MusicRecord]) -> None:
        payload = _CATALOG.dump_json(list(records), indent=JSON_INDENT)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # atomic replace
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "wb") as handle:
                    handle.write(payload)
                Path(tmp_name).replace(self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise MusicExporterError(f"Failed to write catalog {self.path}", cause=exc) from exc
        log.info(f"Wrote {len(records)} items to {self.path}")
