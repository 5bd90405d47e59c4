"""Abstract record persistence interface (port) for hoops."""

from abc import ABC, abstractmethod

from hoops.domain.entities import Hoop


class HoopSaver(ABC):
    """Port for persisting a hoop's record. Implemented in the infrastructure layer."""

    @abstractmethod
    async def save(self, hoop: Hoop) -> None:
        """Persist the hoop's attribute snapshot under its storage key.

        Saving the same key twice overwrites the earlier record.
        """
        ...
