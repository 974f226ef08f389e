"""
Schema for the script endpoint's response envelope.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CommandResult(BaseModel):
    """``{success, message, ...}`` as returned by a write action.

    ``success=False`` is a business outcome the caller branches on, not an
    error. Action-specific fields are kept as extras.
    """
    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    success: bool = False
    message: Optional[str] = None
    owner_id: Optional[str] = Field(None, description="Set by add_owner_with_id and add_user")
    user_id: Optional[str] = Field(None, description="Set by add_user")

    @field_validator("message", "owner_id", "user_id", mode="before")
    @classmethod
    def _as_text(cls, value):
        # the sheet echoes numeric cells as numbers
        return None if value is None else str(value)
