"""Abstract record lookup interface (port) for saved hoops."""

from abc import ABC, abstractmethod
from pathlib import Path

from hoops.domain.entities import HoopAttributes


class HoopReader(ABC):
    """Port for loading previously saved hoop records."""

    @abstractmethod
    async def read(self, key: str) -> HoopAttributes:
        """Load the record saved under ``key``.

        Raises:
            RecordNotFoundError: If nothing is stored under the key.
        """
        ...

    @abstractmethod
    async def read_file(self, path: str | Path) -> HoopAttributes:
        """Load a record from an explicit file path.

        Raises:
            RecordNotFoundError: If the file does not exist.
        """
        ...
