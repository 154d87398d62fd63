from dataproc_client.logging.logger import Log


class Session:
    """Holds the bearer token of the signed-in user, if any."""

    def __init__(self, token: str | None = None) -> None:
        self._token = token or None

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def logout(self) -> None:
        self._token = None
        Log.info("Session logged out")
