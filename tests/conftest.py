"""Pytest fixtures for collection-fetch tests."""
import json
from pathlib import Path
from typing import Any, Callable, Dict, List

import httpx
import pytest

from collection_fetch.core.config import FetchConfig
from collection_fetch.workspace.models import Collection

WORKSPACE_ID = "ws-1234"
API_KEY = "PMAK-test-key"


def _make_collection(uid: str, label: str = None, **fields) -> Collection:
    data = {
        "id": fields.pop("id", "col-1"),
        "uid": uid,
        "name": fields.pop("name", "Orders API"),
    }
    if label is not None:
        data["fork"] = {"label": label}
    data.update(fields)
    return Collection.model_validate(data)


@pytest.fixture
def make_collection() -> Callable[..., Collection]:
    """Factory for Collection entries; ``label=None`` means no fork (root collection)."""
    return _make_collection


@pytest.fixture
def listing_payload() -> Dict[str, Any]:
    """Listing body in the shape the Postman API returns.

    Contains the root collection, a staging fork and a feature fork.
    """
    return {
        "collections": [
            {
                "id": "dac5eac9-148d-a32e-b76b-3edee9da28f7",
                "name": "Orders API",
                "owner": "631643",
                "createdAt": "2024-03-01T10:00:00.000Z",
                "updatedAt": "2024-03-05T10:00:00.000Z",
                "uid": "631643-dac5eac9-148d-a32e-b76b-3edee9da28f7",
                "isPublic": False,
            },
            {
                "id": "6a1b1f6e-2b85-4d9b-9f0a-3b1a4c2e7d10",
                "name": "Orders API",
                "owner": "631643",
                "createdAt": "2024-03-02T10:00:00.000Z",
                "updatedAt": "2024-03-06T10:00:00.000Z",
                "uid": "631643-6a1b1f6e-2b85-4d9b-9f0a-3b1a4c2e7d10",
                "fork": {
                    "label": "staging",
                    "createdAt": "2024-03-02T10:00:00.000Z",
                    "from": "631643-dac5eac9-148d-a32e-b76b-3edee9da28f7",
                },
                "isPublic": False,
            },
            {
                "id": "0f4c9b3e-8d21-4b1e-a8a1-5a2b7c9e1f22",
                "name": "Orders API",
                "owner": "631643",
                "createdAt": "2024-03-03T10:00:00.000Z",
                "updatedAt": "2024-03-07T10:00:00.000Z",
                "uid": "631643-0f4c9b3e-8d21-4b1e-a8a1-5a2b7c9e1f22",
                "fork": {
                    "label": "feature-login",
                    "createdAt": "2024-03-03T10:00:00.000Z",
                    "from": "631643-dac5eac9-148d-a32e-b76b-3edee9da28f7",
                },
                "isPublic": False,
            },
        ]
    }


@pytest.fixture
def document_bytes() -> bytes:
    """Collection document with non-ASCII text and no trailing newline."""
    return json.dumps(
        {"collection": {"info": {"name": "Orders API – résumé"}, "item": []}},
        ensure_ascii=False,
    ).encode("utf-8")


@pytest.fixture
def fake_api(listing_payload, document_bytes) -> Callable[..., Dict[str, Any]]:
    """Factory for an in-memory Postman API.

    Returns dict with:
        - transport: httpx.MockTransport to hand to WorkspaceClient
        - requests: list of every httpx.Request received
    """

    def factory(
        listing: Any = None,
        document: bytes = None,
        listing_status: int = 200,
        document_status: int = 200,
    ) -> Dict[str, Any]:
        body = listing_payload if listing is None else listing
        doc = document_bytes if document is None else document
        requests: List[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if request.url.path == "/collections":
                if isinstance(body, bytes):
                    return httpx.Response(listing_status, content=body)
                return httpx.Response(listing_status, json=body)
            if request.url.path.startswith("/collections/"):
                return httpx.Response(document_status, content=doc)
            return httpx.Response(404, json={"error": "not found"})

        return {"transport": httpx.MockTransport(handler), "requests": requests}

    return factory


@pytest.fixture
def env() -> Dict[str, str]:
    return {
        "POSTMAN_API_KEY": API_KEY,
        "POSTMAN_WORKSPACE_ID": WORKSPACE_ID,
        "POSTMAN_API_BASE_URL": "https://postman.test",
    }


@pytest.fixture
def config(tmp_path: Path) -> FetchConfig:
    """Valid config writing to tmp_path/out.json."""
    return FetchConfig(
        api_key=API_KEY,
        workspace_id=WORKSPACE_ID,
        destination_dir=tmp_path,
        filename="out.json",
        branch="feature-login",
        base_url="https://postman.test",
    )
