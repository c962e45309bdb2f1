"""Fork resolution: pick one collection uid for a requested branch."""
import logging
from typing import NamedTuple, Optional, Sequence

from collection_fetch.core.errors import ResolutionError
from collection_fetch.workspace.models import Collection

logger = logging.getLogger(__name__)

STAGING_LABEL = "staging"


class Resolution(NamedTuple):
    uid: str
    exact: bool


def resolve_fork(collections: Sequence[Collection], requested_fork: str) -> Resolution:
    """Select the collection for ``requested_fork``, falling back to staging.

    The scan runs in the given order and stops at the first entry whose fork
    label equals ``requested_fork``. Entries labelled ``staging`` seen before
    that point are remembered as the fallback. The empty label (canonical
    collection) is matched like any other string.

    Args:
        collections: Candidates in the order the API returned them
        requested_fork: Fork label to look for

    Returns:
        Resolution with the selected uid and whether it was an exact match

    Raises:
        ResolutionError: If neither the requested fork nor staging exists
    """
    exact_uid: Optional[str] = None
    staging_uid: Optional[str] = None

    for collection in collections:
        label = collection.fork_label
        if label == requested_fork:
            exact_uid = collection.uid
            break
        if label == STAGING_LABEL:
            staging_uid = collection.uid

    if exact_uid is not None:
        logger.info(f"Fork {requested_fork!r} resolved to {exact_uid}")
        return Resolution(uid=exact_uid, exact=True)

    if staging_uid is not None:
        logger.info(
            f"Fork {requested_fork!r} not found, falling back to {STAGING_LABEL} ({staging_uid})"
        )
        return Resolution(uid=staging_uid, exact=False)

    raise ResolutionError("collection not found")


def resolve_fork_uid(collections: Sequence[Collection], requested_fork: str) -> str:
    """Return only the uid selected by ``resolve_fork``."""
    return resolve_fork(collections, requested_fork).uid
