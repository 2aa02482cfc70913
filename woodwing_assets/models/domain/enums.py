"""Domain enums for the WoodWing Assets client."""

from enum import Enum


class FileReplacePolicy(str, Enum):
    """What the server does when a copied or moved file already exists.

    Inherits from str to ensure JSON serialization works correctly.
    """

    AUTO_RENAME = "AUTO_RENAME"
    OVERWRITE = "OVERWRITE"
    OVERWRITE_IF_NEWER = "OVERWRITE_IF_NEWER"
    REMOVE_SOURCE = "REMOVE_SOURCE"
    THROW_EXCEPTION = "THROW_EXCEPTION"
    DO_NOTHING = "DO_NOTHING"


class FolderReplacePolicy(str, Enum):
    """What the server does when a moved folder already exists."""

    AUTO_RENAME = "AUTO_RENAME"
    MERGE = "MERGE"
    THROW_EXCEPTION = "THROW_EXCEPTION"


class RelationTarget(str, Enum):
    """Side of a relation to match in a ``relatedTo:`` search."""

    PARENT = "parent"
    CHILD = "child"
    ANY = "any"


class RelationType(str, Enum):
    """Relation types known to the server."""

    CONTAINS = "contains"
    RELATED = "related"
    REFERENCES = "references"
    REFERENCED_BY = "referenced-by"
    CONTAINS_VARIATION = "contains-variation"
    VARIATION_OF = "variation-of"
