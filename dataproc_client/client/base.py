from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class BaseProcessingClient(ABC):
    """Contract for processing-service transport adapters."""

    @abstractmethod
    async def process(self, payload: Mapping[str, Any], *, token: str | None) -> Any:
        """Send one payload and return the decoded success body.

        Args:
            payload: Request body, serialized as JSON.
            token: Bearer credential; the header is omitted when None.

        Raises:
            NetworkError: if no response was received.
            ServiceError: on a non-success status or an undecodable body.
        """

    @abstractmethod
    async def get_operation_code(self, *, token: str | None) -> int:
        """Fetch the service's operation code."""

    async def aclose(self) -> None:
        """Release transport resources."""
