"""Abstract notification interface (port) for newly saved hoops."""

from abc import ABC, abstractmethod

from hoops.domain.entities import Hoop


class HoopNotifier(ABC):
    """Port for telling someone a hoop was added."""

    @property
    @abstractmethod
    def enabled(self) -> bool:
        """Whether the notifier is configured to send anything."""
        ...

    @abstractmethod
    async def notify(self, hoop: Hoop) -> None:
        ...
