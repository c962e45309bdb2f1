"""HTTP client for the Postman collections API."""
import logging
from typing import Optional, Tuple

import httpx
import pydantic

from collection_fetch.core.config import FetchConfig
from collection_fetch.core.errors import DecodeError, TransportError
from collection_fetch.workspace.models import Collection, CollectionListing

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-API-Key"


class WorkspaceClient:
    """Client for listing and downloading the collections of one workspace.

    Each method performs exactly one request, with no retries. Use as a
    context manager so the underlying connection is closed.
    """

    def __init__(
        self,
        config: FetchConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            config: Validated run configuration
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.config = config
        self._http = httpx.Client(
            base_url=config.base_url,
            headers={API_KEY_HEADER: config.api_key},
            timeout=config.timeout,
            transport=transport,
        )

    def __enter__(self) -> "WorkspaceClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def _get(self, url: str, params: Optional[dict] = None) -> httpx.Response:
        try:
            response = self._http.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"GET {url} returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(f"GET {url} failed: {e}") from e
        return response

    def list_collections(self) -> Tuple[Collection, ...]:
        """List every collection in the configured workspace.

        Returns:
            Collections in the order the API returned them

        Raises:
            TransportError: If the request fails or returns an error status
            DecodeError: If the body is not a valid collection listing
        """
        workspace_id = self.config.workspace_id
        logger.info(f"Listing collections in workspace {workspace_id}")
        response = self._get("/collections", params={"workspace": workspace_id})

        try:
            listing = CollectionListing.model_validate_json(response.content)
        except pydantic.ValidationError as e:
            raise DecodeError(
                f"Cannot decode collection listing for workspace {workspace_id}: {e}"
            ) from e

        logger.info(f"Found {len(listing.collections)} collections")
        return tuple(listing.collections)

    def fetch_collection_document(self, uid: str) -> bytes:
        """Download the full collection document for ``uid`` as raw bytes.

        Raises:
            TransportError: If the request fails or returns an error status
        """
        logger.info(f"Fetching collection {uid}")
        response = self._get(f"/collections/{uid}")
        data = response.content
        logger.debug(f"Received {len(data)} bytes for collection {uid}")
        return data
