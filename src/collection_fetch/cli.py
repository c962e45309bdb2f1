"""collection-fetch CLI - Command line interface for collection-fetch."""
import logging
import os
import sys
from pathlib import Path

import click

from collection_fetch.core.config import DEFAULT_FILENAME, DEFAULT_TIMEOUT, load_config
from collection_fetch.core.errors import (
    CollectionFetchError,
    ResolutionError,
    ValidationError,
)
from collection_fetch.workspace import WorkspaceClient, sync_collection

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(name)s: %(message)s",
)
logger = logging.getLogger("collection_fetch")


def _report_validation_errors(error: ValidationError) -> None:
    for message in error.messages:
        click.echo(message)
    logger.error(f"Configuration invalid ({len(error.messages)} problem(s))")


@click.group()
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """collection-fetch - Download Postman collection forks from a workspace."""
    if verbose:
        logger.setLevel(logging.DEBUG)


@main.command()
@click.option(
    "--path",
    "destination_dir",
    default=None,
    type=click.Path(path_type=Path),
    help="Existing directory, writable by the current user, to write the collection into",
)
@click.option(
    "--filename",
    default=DEFAULT_FILENAME,
    show_default=True,
    help="Name of the written file",
)
@click.option(
    "--branch",
    default="",
    help="Fork label to fetch; falls back to the staging fork if it does not exist",
)
@click.option(
    "--base-url",
    default=None,
    help="API base URL (default: $POSTMAN_API_BASE_URL or https://api.getpostman.com)",
)
@click.option(
    "--timeout",
    type=float,
    default=DEFAULT_TIMEOUT,
    show_default=True,
    help="Per-request timeout in seconds",
)
def fetch(destination_dir: Path, filename: str, branch: str, base_url: str, timeout: float):
    """Fetch a collection fork and write it to PATH/FILENAME.

    Reads POSTMAN_API_KEY and POSTMAN_WORKSPACE_ID from the environment.

    Examples:
        collection-fetch fetch --path ./postman --branch feature-login
        collection-fetch fetch --path ./postman --filename api.json

    Exit codes:
        0: Success
        1: Generic runtime failure (network, decode, write)
        2: Invalid CLI usage
        3: Neither the requested fork nor staging exists
        7: Configuration error
    """
    try:
        config = load_config(
            os.environ,
            destination_dir=destination_dir,
            filename=filename,
            branch=branch,
            base_url=base_url,
            timeout=timeout,
        )
    except ValidationError as e:
        _report_validation_errors(e)
        sys.exit(7)

    try:
        with WorkspaceClient(config) as client:
            result = sync_collection(config, client)

        click.echo(f"[OK] Collection fetched: {result.collection_uid}")
        if not result.fork_matched:
            click.echo(f"  Fork '{config.branch}' not found, used staging")
        click.echo(f"  Path: {result.destination}")
        click.echo(f"  Bytes: {result.bytes_written}")
        sys.exit(0)

    except ResolutionError as e:
        logger.error(f"Resolution failed: {str(e)}")
        sys.exit(3)

    except CollectionFetchError as e:
        logger.error(f"Fetch failed: {str(e)}")
        sys.exit(1)


@main.command()
@click.option(
    "--base-url",
    default=None,
    help="API base URL (default: $POSTMAN_API_BASE_URL or https://api.getpostman.com)",
)
def collections(base_url: str):
    """List collections in the workspace with their fork labels.

    Exit codes:
        0: Success
        1: Generic runtime failure (network, decode)
        7: Configuration error
    """
    try:
        config = load_config(os.environ, base_url=base_url, require_destination=False)
    except ValidationError as e:
        _report_validation_errors(e)
        sys.exit(7)

    try:
        with WorkspaceClient(config) as client:
            entries = client.list_collections()
    except CollectionFetchError as e:
        logger.error(f"Listing failed: {str(e)}")
        sys.exit(1)

    for entry in entries:
        label = entry.fork_label or "-"
        click.echo(f"{entry.uid}\t{label}\t{entry.name}")
    sys.exit(0)


if __name__ == "__main__":
    main()
