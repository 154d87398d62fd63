from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar

from dataproc_client.submission.exceptions import SubmissionError


class SubmissionPayload(Mapping[str, Any]):
    """Request body: the user's JSON object plus the encoded file.

    The reserved ``file_b64`` key is written after the user's keys, so a
    user-supplied ``file_b64`` is replaced (last write wins).
    """

    FILE_FIELD: ClassVar[str] = "file_b64"

    def __init__(self, fields: Mapping[str, Any], encoded_file: str = "") -> None:
        self._data: dict[str, Any] = dict(fields)
        self.replaced_file_field = self.FILE_FIELD in self._data
        self._data[self.FILE_FIELD] = encoded_file

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        keys = ", ".join(self._data)
        return f"SubmissionPayload(keys=[{keys}])"

    @property
    def encoded_file(self) -> str:
        return self._data[self.FILE_FIELD]

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)


@dataclass(frozen=True)
class ProcessedResult:
    """Structured outcome returned by the processing service."""

    is_success: bool
    user_id: str
    email: str
    roll_number: str
    numbers: list[str] = field(default_factory=list)
    alphabets: list[str] = field(default_factory=list)
    highest_lowercase_alphabet: list[str] = field(default_factory=list)
    is_prime_found: bool = False
    file_valid: bool | None = None
    file_mime_type: str | None = None
    file_size_kb: str | None = None

    @property
    def has_file_info(self) -> bool:
        return bool(self.file_valid) or bool(self.file_mime_type)


@dataclass(frozen=True)
class SubmissionOutcome:
    """Terminal result of one submission: a result or an error, never both."""

    result: ProcessedResult | None = None
    error: SubmissionError | None = None

    def __post_init__(self) -> None:
        if (self.result is None) == (self.error is None):
            raise ValueError("SubmissionOutcome needs exactly one of result or error")

    @property
    def succeeded(self) -> bool:
        return self.result is not None
