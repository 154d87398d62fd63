import asyncio
import base64

from dataproc_client.encoding.exceptions import FileReadError
from dataproc_client.encoding.models import FileAttachment


class Encoder:
    """Converts a file attachment into bare base64 text."""

    async def encode(self, attachment: FileAttachment) -> str:
        """Read the attachment fully and return its base64 encoding.

        The file is read off the event loop. The result is the bare base64
        payload with no data-URI prefix.

        Raises:
            FileReadError: if the file cannot be read or is shorter or
                longer than its reported size.
        """
        raw_bytes = await asyncio.to_thread(self._read, attachment)
        return base64.b64encode(raw_bytes).decode("ascii")

    @staticmethod
    def _read(attachment: FileAttachment) -> bytes:
        try:
            raw_bytes = attachment.path.read_bytes()
        except OSError as exc:
            raise FileReadError(
                f"Failed to read '{attachment.name}': {exc}"
            ) from exc
        if len(raw_bytes) != attachment.size_bytes:
            raise FileReadError(
                f"Read {len(raw_bytes)} bytes from '{attachment.name}', "
                f"expected {attachment.size_bytes}"
            )
        return raw_bytes
