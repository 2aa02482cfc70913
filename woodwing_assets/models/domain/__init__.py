"""Domain models for the WoodWing Assets client."""

from .enums import FileReplacePolicy, FolderReplacePolicy, RelationTarget, RelationType
from .metadata import Metadata, normalize_metadata
from .profile import ASSETS_PROFILE, ELVIS_PROFILE, PROFILES, ApiProfile

__all__ = [
    "FileReplacePolicy",
    "FolderReplacePolicy",
    "RelationTarget",
    "RelationType",
    "Metadata",
    "normalize_metadata",
    "ApiProfile",
    "ASSETS_PROFILE",
    "ELVIS_PROFILE",
    "PROFILES",
]
