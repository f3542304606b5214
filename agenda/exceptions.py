from typing import Optional


class TransportError(Exception):
    """A request to the contacts API did not complete successfully."""

    def __init__(
        self,
        message: str,
        method: str = "",
        url: str = "",
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.method = method
        self.url = url
        self.status_code = status_code
