import json
from typing import List, Optional

import httpx
import pytest

from agenda.api import ContactsApiClient

BASE_URL = "http://testserver.local/contacts"


class FakeJsonServer:
    """In-memory stand-in for the contacts backend, served via httpx.MockTransport."""

    def __init__(self) -> None:
        self.contacts: List[dict] = []
        self.next_id = 1
        self.requests: List[httpx.Request] = []
        self.fail_with: Optional[int] = None
        self.offline = False

    def seed(self, **fields) -> dict:
        contact = {"id": str(self.next_id), "tag": "", **fields}
        self.next_id += 1
        self.contacts.append(contact)
        return contact

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.offline:
            raise httpx.ConnectError("connection refused", request=request)
        if self.fail_with is not None:
            return httpx.Response(self.fail_with, json={"error": "boom"})

        path = request.url.path.rstrip("/")
        if path == "/contacts":
            if request.method == "GET":
                return httpx.Response(200, json=self.contacts)
            if request.method == "POST":
                contact = {"id": str(self.next_id), **json.loads(request.content)}
                self.next_id += 1
                self.contacts.append(contact)
                return httpx.Response(201, json=contact)
        elif path.startswith("/contacts/") and request.method == "DELETE":
            contact_id = path.rsplit("/", 1)[1]
            for i, contact in enumerate(self.contacts):
                if str(contact["id"]) == contact_id:
                    self.contacts.pop(i)
                    return httpx.Response(200, json={})
        return httpx.Response(404, json={})

    def calls(self, method: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == method]


@pytest.fixture
def server() -> FakeJsonServer:
    return FakeJsonServer()


@pytest.fixture
def transport(server: FakeJsonServer) -> httpx.MockTransport:
    return httpx.MockTransport(server.handler)


@pytest.fixture
def api(transport: httpx.MockTransport) -> ContactsApiClient:
    return ContactsApiClient(BASE_URL, transport=transport)
