"""Example processing client adapter.

Use this module as a reference when implementing new transport adapters.
Implement BaseProcessingClient and register the provider in
ProcessingClientFactory.
"""

import copy
from collections.abc import Mapping
from typing import Any, ClassVar

from dataproc_client.client.base import BaseProcessingClient


class ExampleClientAdapter(BaseProcessingClient):
    """Example adapter that answers every payload with a fixed result.

    No network calls. Useful for local development and demos.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "is_success": True,
        "user_id": "example_user_01011990",
        "email": "example@example.com",
        "roll_number": "EX0000",
        "numbers": [],
        "alphabets": [],
        "highest_lowercase_alphabet": [],
        "is_prime_found": False,
        "file_valid": False,
    }
    OPERATION_CODE: ClassVar[int] = 1

    async def process(self, payload: Mapping[str, Any], *, token: str | None) -> Any:
        _ = payload, token
        return copy.deepcopy(self.DEFAULT_RESPONSE)

    async def get_operation_code(self, *, token: str | None) -> int:
        _ = token
        return self.OPERATION_CODE
