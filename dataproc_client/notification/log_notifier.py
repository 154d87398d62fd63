from dataproc_client.logging.logger import Log
from dataproc_client.notification.base import BaseNotifier


class LogNotifier(BaseNotifier):
    """Writes notifications through the application logger."""

    def success(self, message: str) -> None:
        Log.info(f"[success] {message}")

    def error(self, message: str) -> None:
        Log.error(f"[error] {message}")
