"""Abstract media persistence interface (port) for hoop attachments."""

from abc import ABC, abstractmethod

from hoops.domain.entities import Hoop


class HoopMediaSaver(ABC):
    """Port for storing a hoop's attached image."""

    @abstractmethod
    async def save(self, hoop: Hoop, content: bytes, content_type: str) -> str:
        """Store the attachment and return the filename it was stored under.

        Implementations must not modify the hoop; the caller assigns the
        returned filename.
        """
        ...
