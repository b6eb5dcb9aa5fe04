"""
Pydantic Schemas - records stored in the key-value store.
"""

from typing import Union

from pydantic import BaseModel, Field, ValidationError

from core.errors import SerializationError
from core.messages import ErrorMessages


# =============================================================================
# User Profile
# =============================================================================


class User(BaseModel):
    """
    Flat user profile record.

    Serialized with the short JSON keys the consumers of this key expect:
    {"ispro":true,"userid":"4","username":"agnynureza","playerid":""}
    """

    is_pro: bool = Field(..., alias="ispro")
    user_id: str = Field(..., alias="userid", description="Numeric-looking id kept as text")
    username: str = Field(..., alias="username")
    player_id: str = Field(default="", alias="playerid", description="May be empty")

    class Config:
        frozen = True
        populate_by_name = True
        json_schema_extra = {
            "examples": [
                {
                    "ispro": True,
                    "userid": "4",
                    "username": "agnynureza",
                    "playerid": "",
                }
            ]
        }

    def to_json(self) -> bytes:
        """Serialize to compact JSON with every field present."""
        try:
            return self.model_dump_json(by_alias=True).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise SerializationError(
                ErrorMessages.SERIALIZE_FAILED.format(model="User", error=e)
            ) from e

    @classmethod
    def from_json(cls, payload: Union[bytes, str]) -> "User":
        try:
            return cls.model_validate_json(payload)
        except ValidationError as e:
            raise SerializationError(
                ErrorMessages.DESERIALIZE_FAILED.format(model="User", error=e)
            ) from e


def demo_user() -> User:
    """The record stored by the set-struct demo step."""
    return User(is_pro=True, user_id="4", username="agnynureza", player_id="")
