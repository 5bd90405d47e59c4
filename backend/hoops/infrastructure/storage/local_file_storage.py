"""Local filesystem storage for hoop records and their images.

Storage layout:
    <data_dir>/<storage_key>.json          — record
    <data_dir>/<storage_key>.<png|jpg>     — attached image, when one was saved

``storage_key`` is ``<YYYYMMDD><id without dashes>``.
"""

import logging
import os
from pathlib import Path

from pydantic import ValidationError

from hoops.application.interfaces import HoopMediaSaver, HoopReader, HoopSaver
from hoops.application.schemas import HoopRecordSchema
from hoops.domain.entities import Hoop, HoopAttributes, extension_for
from hoops.domain.exceptions import RecordFormatError, RecordNotFoundError

logger = logging.getLogger(__name__)

_RECORD_SUFFIX = ".json"
_FILE_MODE = 0o600


class _DataDirectory:
    """Shared base for the adapters that work inside one data directory."""

    def __init__(self, data_dir: str | Path):
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def record_path(self, key: str) -> Path:
        return self._data_dir / f"{key}{_RECORD_SUFFIX}"

    @staticmethod
    def _write(path: Path, content: bytes) -> None:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _FILE_MODE)
        with os.fdopen(fd, "wb") as fh:
            fh.write(content)


class FilesystemHoopSaver(_DataDirectory, HoopSaver):
    """Infrastructure adapter — writes each record to ``<data_dir>/<key>.json``."""

    async def save(self, hoop: Hoop) -> None:
        path = self.record_path(hoop.storage_key)
        body = HoopRecordSchema.from_domain(hoop.attributes).to_json()
        self._write(path, body.encode("utf-8"))
        logger.info("Stored hoop record: %s", path)


class FilesystemHoopMediaSaver(_DataDirectory, HoopMediaSaver):
    """Infrastructure adapter — writes attachments next to their records."""

    async def save(self, hoop: Hoop, content: bytes, content_type: str) -> str:
        filename = hoop.storage_key + extension_for(content_type)
        path = self._data_dir / filename
        self._write(path, content)
        logger.info("Stored hoop image: %s (%d bytes)", path, len(content))
        return filename


class FilesystemHoopReader(_DataDirectory, HoopReader):
    """Infrastructure adapter — loads records written by :class:`FilesystemHoopSaver`."""

    async def read(self, key: str) -> HoopAttributes:
        return await self.read_file(self.record_path(key))

    async def read_file(self, path: str | Path) -> HoopAttributes:
        """Load a record from an explicit file path."""
        path = Path(path)
        try:
            raw = path.read_text("utf-8")
        except FileNotFoundError:
            raise RecordNotFoundError(str(path)) from None

        try:
            record = HoopRecordSchema.model_validate_json(raw)
        except ValidationError as exc:
            raise RecordFormatError(str(path), str(exc)) from exc
        return record.to_domain()
