from abc import ABC, abstractmethod


class NotificationError(Exception):
    """Message could not be delivered"""


class INotifier(ABC):
    """Out-of-band message delivery - application layer"""

    @abstractmethod
    async def send(self, recipient: str, subject: str, body: str) -> None:
        """Deliver a plain-text message, raising NotificationError on failure"""
        pass
