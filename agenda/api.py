"""
Async client for the contacts JSON backend.

The backend is a plain REST collection (JSON Server style):

    GET    <base>        -> list of contacts
    POST   <base>        -> created contact, with a server-assigned id
    DELETE <base>/<id>   -> any 2xx
"""

from typing import List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from agenda.exceptions import TransportError
from agenda.logging import get_logger
from agenda.models import Contact, ContactId, DraftContact

logger = get_logger(__name__)

_contact_list = TypeAdapter(List[Contact])


class ContactsApiClient:
    """Thin wrapper around the contacts collection endpoint.

    Every failure, whether the request never completed, the server answered
    with a non-success status or the body was not a contact payload, is
    reported as :class:`TransportError`. Nothing is retried.
    """

    def __init__(
        self,
        base_url: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Args:
            base_url: Collection URL, e.g. ``http://localhost:3002/contacts``.
            transport: Optional httpx transport, mostly for tests.
        """
        self._base_url = base_url.rstrip("/")
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def base_url(self) -> str:
        return self._base_url

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(transport=self._transport)
        return self._client

    async def close(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "ContactsApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        client = await self._get_client()
        try:
            response = await client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                f"{method} {url} answered {exc.response.status_code}",
                method=method,
                url=url,
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(
                f"{method} {url} failed: {exc}", method=method, url=url
            ) from exc

        logger.debug(
            "Contacts API request completed",
            extra={"method": method, "url": url, "status_code": response.status_code},
        )
        return response

    async def list_contacts(self) -> List[Contact]:
        """Return every contact in the order the server sends them."""
        response = await self._request("GET", self._base_url)
        try:
            return _contact_list.validate_json(response.content)
        except ValidationError as exc:
            raise TransportError(
                "Unexpected contact list payload",
                method="GET",
                url=self._base_url,
                status_code=response.status_code,
            ) from exc

    async def create_contact(self, draft: DraftContact) -> Contact:
        """Create a contact; the identifier is always assigned by the server."""
        response = await self._request(
            "POST", self._base_url, json=draft.model_dump(include={"name", "phone", "email", "tag"})
        )
        try:
            return Contact.model_validate_json(response.content)
        except ValidationError as exc:
            raise TransportError(
                "Unexpected created contact payload",
                method="POST",
                url=self._base_url,
                status_code=response.status_code,
            ) from exc

    async def delete_contact(self, contact_id: ContactId) -> None:
        await self._request("DELETE", f"{self._base_url}/{contact_id}")
