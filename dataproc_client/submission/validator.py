"""Validates a decoded success body and builds a ProcessedResult."""

from typing import Any

from dataproc_client.submission.exceptions import ResponseValidationError
from dataproc_client.submission.models import ProcessedResult

_STRING_FIELDS = ("user_id", "email", "roll_number")
_LIST_FIELDS = ("numbers", "alphabets", "highest_lowercase_alphabet")
_BOOL_FIELDS = ("is_success", "is_prime_found")


def validate_and_build(data: Any) -> ProcessedResult:
    """Validate a decoded response body and build a ProcessedResult.

    Raises:
        ResponseValidationError: on any shape mismatch.
    """
    if not isinstance(data, dict):
        raise ResponseValidationError(detail="Response body must be a JSON object")
    for name in _BOOL_FIELDS:
        _require_bool(data, name)
    for name in _STRING_FIELDS:
        _require_string(data, name)
    lists = {name: _build_string_list(data, name) for name in _LIST_FIELDS}
    return ProcessedResult(
        is_success=data["is_success"],
        user_id=data["user_id"],
        email=data["email"],
        roll_number=data["roll_number"],
        numbers=lists["numbers"],
        alphabets=lists["alphabets"],
        highest_lowercase_alphabet=lists["highest_lowercase_alphabet"],
        is_prime_found=data["is_prime_found"],
        file_valid=_build_file_valid(data.get("file_valid")),
        file_mime_type=_build_optional_string(data.get("file_mime_type"), "file_mime_type"),
        file_size_kb=_build_file_size_kb(data.get("file_size_kb")),
    )


def _require_bool(data: dict[str, Any], name: str) -> None:
    if not isinstance(data.get(name), bool):
        raise ResponseValidationError(detail=f"'{name}' must be a boolean")


def _require_string(data: dict[str, Any], name: str) -> None:
    if not isinstance(data.get(name), str):
        raise ResponseValidationError(detail=f"'{name}' must be a string")


def _build_string_list(data: dict[str, Any], name: str) -> list[str]:
    raw = data.get(name, [])
    if not isinstance(raw, list):
        raise ResponseValidationError(detail=f"'{name}' must be a list")
    for i, item in enumerate(raw):
        if not isinstance(item, str):
            raise ResponseValidationError(
                detail=f"'{name}' item at index {i} must be a string"
            )
    return list(raw)


def _build_file_valid(raw: Any) -> bool | None:
    if raw is None or isinstance(raw, bool):
        return raw
    raise ResponseValidationError(detail="'file_valid' must be a boolean or null")


def _build_optional_string(raw: Any, name: str) -> str | None:
    if raw is None or isinstance(raw, str):
        return raw
    raise ResponseValidationError(detail=f"'{name}' must be a string or null")


def _build_file_size_kb(raw: Any) -> str | None:
    if raw is None or isinstance(raw, str):
        return raw
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return str(raw)
    raise ResponseValidationError(detail="'file_size_kb' must be a string, number or null")
