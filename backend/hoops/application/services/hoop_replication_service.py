"""Application service (use case) for pushing saved hoops to another backend."""

from pathlib import Path

from hoops.application.interfaces import HoopReader, HoopSaver
from hoops.domain.entities import Hoop, HoopAttributes
from hoops.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage

plog = PipelineLogger()


class HoopReplicationService:
    """Reads records from the local store and saves them again through ``target``."""

    def __init__(self, reader: HoopReader, target: HoopSaver):
        self._reader = reader
        self._target = target

    async def _replicate(self, attributes: HoopAttributes) -> Hoop:
        hoop = Hoop.from_attributes(attributes)
        with plog.timed_step(PipelineStage.REPLICATE, f"Pushing hoop {hoop.id}"):
            await self._target.save(hoop)
        return hoop

    async def push(self, key: str) -> Hoop:
        """Replicate the record saved under storage key ``key``."""
        return await self._replicate(await self._reader.read(key))

    async def push_file(self, path: str | Path) -> Hoop:
        """Replicate the record stored in the JSON file at ``path``."""
        return await self._replicate(await self._reader.read_file(path))
