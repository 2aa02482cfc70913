"""Helpers shaping values into form parameters for the service endpoints."""

import json
from typing import Any, Iterable

from ..models.domain.metadata import Metadata, normalize_metadata


def bool_flag(value: bool) -> str:
    """Render a boolean the way the service endpoints expect it."""
    return "true" if value else "false"


def join_values(values: Iterable[Any]) -> str:
    """Comma-join ids or field names."""
    return ",".join(str(value) for value in values)


def encode_metadata(metadata: Metadata) -> str:
    """JSON-encode metadata after normalizing empty lists."""
    return json.dumps(normalize_metadata(metadata))


def has_file(filedata: Any) -> bool:
    """Check whether an open file handle is attached.

    Paths and raw bytes are not file handles and do not count.
    """
    if filedata is None or isinstance(filedata, (str, bytes)):
        return False
    return hasattr(filedata, "read") and not getattr(filedata, "closed", False)
