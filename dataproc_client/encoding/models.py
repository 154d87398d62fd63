import mimetypes
from dataclasses import dataclass
from pathlib import Path

DEFAULT_MIME_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class FileAttachment:
    """A file selected for submission.

    ``mime_type`` is whatever the source reported and is not verified
    against the contents.
    """

    name: str
    mime_type: str
    size_bytes: int
    path: Path

    @classmethod
    def from_path(cls, path: Path) -> "FileAttachment":
        """Describe a file on disk.

        Raises:
            FileNotFoundError: if nothing exists at ``path``.
        """
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        mime_type, _ = mimetypes.guess_type(path.name)
        return cls(
            name=path.name,
            mime_type=mime_type or DEFAULT_MIME_TYPE,
            size_bytes=path.stat().st_size,
            path=path,
        )
