from abc import ABC, abstractmethod


class BaseNotifier(ABC):
    """Contract for user-facing notifications. Fire-and-forget."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Surface a success message."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Surface an error message."""
