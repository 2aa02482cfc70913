"""Differences between the server flavors the client talks to."""

from pydantic import BaseModel, ConfigDict, Field


class ApiProfile(BaseModel):
    """Protocol details that differ between WoodWing Assets and legacy Elvis.

    Attributes:
        name: Flavor name, used in log records
        update_sends_file: Whether update uploads ``Filedata`` and sends
            ``clearCheckoutState`` when a file is attached
        update_always_sends_metadata: Whether update sends ``metadata`` even
            when it is empty
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Server flavor name")
    update_sends_file: bool = Field(
        True, description="Update uploads Filedata and clearCheckoutState"
    )
    update_always_sends_metadata: bool = Field(
        False, description="Update sends metadata even when empty"
    )


ASSETS_PROFILE = ApiProfile(name="assets")
ELVIS_PROFILE = ApiProfile(
    name="elvis", update_sends_file=False, update_always_sends_metadata=True
)

PROFILES = {profile.name: profile for profile in (ASSETS_PROFILE, ELVIS_PROFILE)}
