"""Loading gathered audit artifacts from JSON files."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from consistently_interactive.errors import ArtifactLoadError
from consistently_interactive.models import AuditArtifacts

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def load_artifacts(path: Path) -> AuditArtifacts:
    """Read and validate an artifact bundle (camelCase or snake_case keys)."""
    try:
        raw = path.read_text()
    except OSError as e:
        raise ArtifactLoadError(str(path), e.strerror or str(e)) from e
    return parse_artifacts(raw, source=str(path))


def parse_artifacts(raw: str | bytes, *, source: str = "<string>") -> AuditArtifacts:
    try:
        artifacts = AuditArtifacts.model_validate_json(raw)
    except ValidationError as e:
        raise ArtifactLoadError(source, f"{e.error_count()} validation error(s)") from e

    logger.debug(
        "Loaded %d network records and %s long tasks from %s",
        len(artifacts.network_records),
        "no" if artifacts.long_tasks is None else len(artifacts.long_tasks),
        source,
    )
    return artifacts
