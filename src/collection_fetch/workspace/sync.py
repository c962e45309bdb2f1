"""One-shot pipeline: list, resolve, fetch, write."""
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from collection_fetch.core.config import FetchConfig
from collection_fetch.workspace.client import WorkspaceClient
from collection_fetch.workspace.resolver import resolve_fork
from collection_fetch.workspace.writer import write_document

logger = logging.getLogger(__name__)


class SyncResult(BaseModel):
    """Outcome of a successful sync."""

    model_config = ConfigDict(frozen=True)

    collection_uid: str = Field(..., description="uid of the downloaded collection")
    fork_matched: bool = Field(..., description="False when the staging fallback was used")
    destination: Path = Field(..., description="File the document was written to")
    bytes_written: int = Field(..., ge=0)


def sync_collection(config: FetchConfig, client: WorkspaceClient) -> SyncResult:
    """Download the collection for ``config.branch`` and write it to disk.

    Each step runs only if the previous one succeeded; any CollectionFetchError
    propagates unchanged to the caller.
    """
    collections = client.list_collections()
    resolution = resolve_fork(collections, config.branch)

    data = client.fetch_collection_document(resolution.uid)
    destination = write_document(data, config.destination)

    return SyncResult(
        collection_uid=resolution.uid,
        fork_matched=resolution.exact,
        destination=destination,
        bytes_written=len(data),
    )
