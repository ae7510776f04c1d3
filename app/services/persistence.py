"""Load and save the favorites list to/from a JSON file.

The file holds a pretty-printed JSON array of ``{id, joke, status}`` objects.
Saves write a sibling temp file and rename it over the target so readers
never see a half-written list.
"""
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, List

from pydantic import ValidationError

from app.config import settings
from app.core.errors import (
    StorageDecodeError,
    StorageReadError,
    StorageSerializeError,
    StorageWriteError,
)
from app.schemas import JokeRecord

logger = logging.getLogger(__name__)


class FavoritesGateway:
    def __init__(self, path: Path = settings.favorites_path):
        self.path = Path(path)

    def save(self, records: Iterable[JokeRecord]) -> None:
        try:
            payload = [record.to_payload() for record in records]
            data = json.dumps(payload, indent=2, ensure_ascii=False)
        except (TypeError, ValueError, AttributeError) as exc:
            raise StorageSerializeError("save_favorites", str(exc)) from exc

        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageWriteError("save_favorites", f"{self.path}: {exc}") from exc

        logger.info("Saved %d favorites to %s", len(payload), self.path)

    def load(self) -> List[JokeRecord]:
        """Return stored favorites in order; a missing file means none yet."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("No saved favorites at %s", self.path)
            return []
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageReadError("load_favorites", f"{self.path}: {exc}") from exc

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StorageDecodeError("load_favorites", f"{self.path}: {exc}") from exc
        if not isinstance(data, list):
            raise StorageDecodeError("load_favorites", f"{self.path}: expected a JSON array")

        try:
            records = [JokeRecord.from_payload(item) for item in data]
        except ValidationError as exc:
            raise StorageDecodeError("load_favorites", f"{self.path}: {exc}") from exc

        logger.info("Loaded %d favorites from %s", len(records), self.path)
        return records
