"""Open metadata mapping exchanged with the server."""

from typing import Any, Dict

# Field name -> value; the schema is configured on the server, so it stays open
Metadata = Dict[str, Any]


def normalize_metadata(metadata: Metadata) -> Metadata:
    """Prepare metadata for transmission.

    The server does not clear a field when it receives an empty array for it,
    but it does for an empty string, so empty lists are sent as ``""``.
    All other values pass through unchanged.

    Args:
        metadata: Metadata to send

    Returns:
        A new mapping with empty list values replaced by empty strings
    """
    return {
        field: "" if isinstance(value, list) and not value else value
        for field, value in metadata.items()
    }
