"""Run configuration: built once at startup, passed to every component."""
import logging
import os
from pathlib import Path
from typing import List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from collection_fetch.core.errors import ValidationError

logger = logging.getLogger(__name__)

ENV_API_KEY = "POSTMAN_API_KEY"
ENV_WORKSPACE_ID = "POSTMAN_WORKSPACE_ID"
ENV_BASE_URL = "POSTMAN_API_BASE_URL"

DEFAULT_BASE_URL = "https://api.getpostman.com"
DEFAULT_FILENAME = "default.json"
DEFAULT_TIMEOUT = 30.0


class FetchConfig(BaseModel):
    """Immutable settings for one invocation.

    Construction never fails on missing values; call ``validate_config``
    (or use ``load_config``) to run the validation gate.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(default="", description="Postman API key sent as X-API-Key")
    workspace_id: str = Field(default="", description="Workspace whose collections are listed")
    destination_dir: Optional[Path] = Field(default=None, description="Directory the document is written to")
    filename: str = Field(default=DEFAULT_FILENAME, description="Name of the written file")
    branch: str = Field(default="", description="Requested fork label; empty means the root collection")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="API base URL")
    timeout: float = Field(default=DEFAULT_TIMEOUT, description="Per-request timeout in seconds")

    @property
    def destination(self) -> Path:
        """Full path of the output file."""
        if self.destination_dir is None:
            raise ValueError("destination_dir is not configured")
        return self.destination_dir / self.filename


def _is_writable_dir(path: Path) -> bool:
    return path.is_dir() and os.access(path, os.W_OK)


def validate_config(config: FetchConfig, require_destination: bool = True) -> List[str]:
    """Check every input and return all problems found (empty list if valid)."""
    errors = []

    if not config.api_key:
        errors.append(f"env {ENV_API_KEY} required")
    if not config.workspace_id:
        errors.append(f"env {ENV_WORKSPACE_ID} required")

    if require_destination:
        if config.destination_dir is None:
            errors.append("path - destination directory required")
        elif not _is_writable_dir(config.destination_dir):
            errors.append(
                f"path - must be an existing directory writable by the current user: {config.destination_dir}"
            )
        if not config.filename or Path(config.filename).name != config.filename:
            errors.append(f"filename - must be a plain file name, got: {config.filename!r}")

    if not config.base_url.startswith(("http://", "https://")):
        errors.append(f"base url - must start with http:// or https://, got: {config.base_url!r}")
    if not config.timeout > 0:
        errors.append(f"timeout - must be positive, got: {config.timeout}")

    return errors


def load_config(
    environ: Mapping[str, str],
    destination_dir: Optional[Path] = None,
    filename: Optional[str] = None,
    branch: str = "",
    base_url: Optional[str] = None,
    timeout: float = DEFAULT_TIMEOUT,
    require_destination: bool = True,
) -> FetchConfig:
    """Build the run configuration from an environment mapping and CLI values.

    Args:
        environ: Environment mapping (normally ``os.environ``)
        destination_dir: Directory to write into
        filename: Output file name; empty or None falls back to ``default.json``
        branch: Requested fork label
        base_url: API base URL; None falls back to env, then the public API
        timeout: Per-request timeout in seconds
        require_destination: Whether the destination inputs are validated

    Returns:
        A validated FetchConfig

    Raises:
        ValidationError: With every problem found, before any network activity
    """
    config = FetchConfig(
        api_key=environ.get(ENV_API_KEY, ""),
        workspace_id=environ.get(ENV_WORKSPACE_ID, ""),
        destination_dir=Path(destination_dir) if destination_dir is not None else None,
        filename=filename or DEFAULT_FILENAME,
        branch=branch or "",
        base_url=(base_url or environ.get(ENV_BASE_URL) or DEFAULT_BASE_URL).rstrip("/"),
        timeout=timeout,
    )

    errors = validate_config(config, require_destination=require_destination)
    if errors:
        raise ValidationError(errors)

    logger.debug(f"Configuration loaded for workspace {config.workspace_id}")
    return config
