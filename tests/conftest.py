from pathlib import Path

import pytest

from dataproc_client.encoding.models import FileAttachment


@pytest.fixture()
def sample_file_bytes() -> bytes:
    """Binary content covering every byte value, including NULs."""
    return bytes(range(256)) * 3 + b"\x00\xff tail"


@pytest.fixture()
def sample_attachment(tmp_path: Path, sample_file_bytes: bytes) -> FileAttachment:
    path = tmp_path / "sample.png"
    path.write_bytes(sample_file_bytes)
    return FileAttachment.from_path(path)


@pytest.fixture()
def processed_body() -> dict[str, object]:
    """A well-formed success body from the processing service."""
    return {
        "is_success": True,
        "user_id": "john_doe_17091999",
        "email": "john@xyz.com",
        "roll_number": "ABCD123",
        "numbers": ["1", "334", "4"],
        "alphabets": ["A", "C", "z"],
        "highest_lowercase_alphabet": ["z"],
        "is_prime_found": False,
    }
