"""Workspace access: listing, fork resolution, download and write."""
from collection_fetch.workspace.client import WorkspaceClient
from collection_fetch.workspace.models import Collection, CollectionListing, Fork
from collection_fetch.workspace.resolver import (
    STAGING_LABEL,
    Resolution,
    resolve_fork,
    resolve_fork_uid,
)
from collection_fetch.workspace.sync import SyncResult, sync_collection
from collection_fetch.workspace.writer import write_document

__all__ = [
    "Collection",
    "CollectionListing",
    "Fork",
    "Resolution",
    "STAGING_LABEL",
    "SyncResult",
    "WorkspaceClient",
    "resolve_fork",
    "resolve_fork_uid",
    "sync_collection",
    "write_document",
]
