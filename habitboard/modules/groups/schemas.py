from pydantic import BaseModel, Field
from typing import Annotated, Any, List, Literal, Optional, Union
from habitboard.core.schemas import ErrorInfo

UNKNOWN_DISPLAY_NAME = "Unknown"


class ProfileData(BaseModel):
    id: Optional[Union[int, str]] = None
    display_name: Optional[str] = None


class SingleProfile(BaseModel):
    kind: Literal["single"] = "single"
    profile: ProfileData


class ProfileList(BaseModel):
    kind: Literal["list"] = "list"
    profiles: List[ProfileData]


class NoProfile(BaseModel):
    kind: Literal["none"] = "none"


ProfileJoin = Annotated[Union[SingleProfile, ProfileList, NoProfile], Field(discriminator="kind")]


def normalize_profile(raw: Any) -> ProfileJoin:
    """Classify an embedded ``profiles`` value from a group_members row.

    PostgREST returns an object for a to-one embed and a list for a to-many
    embed. Anything else, including an empty list, counts as no profile.
    """
    if isinstance(raw, dict):
        return SingleProfile(profile=ProfileData.model_validate(raw))
    if isinstance(raw, list):
        profiles = [ProfileData.model_validate(p) for p in raw if isinstance(p, dict)]
        if profiles:
            return ProfileList(profiles=profiles)
    return NoProfile()


def display_name_of(join: ProfileJoin) -> str:
    if isinstance(join, SingleProfile):
        return join.profile.display_name or UNKNOWN_DISPLAY_NAME
    if isinstance(join, ProfileList):
        return join.profiles[0].display_name or UNKNOWN_DISPLAY_NAME
    return UNKNOWN_DISPLAY_NAME


def profile_id_of(join: ProfileJoin) -> Optional[Union[int, str]]:
    if isinstance(join, SingleProfile):
        return join.profile.id
    if isinstance(join, ProfileList):
        return join.profiles[0].id
    return None


class MemberRow(BaseModel):
    user_id: str
    profile: ProfileJoin


class GroupProfileResponse(BaseModel):
    user_id: str
    profile_id: Optional[Union[int, str]] = None
    display_name: str


class GroupProfilesResult(BaseModel):
    profiles: Optional[List[GroupProfileResponse]] = None
    error: Optional[ErrorInfo] = None
