"""
Common base for sheet-backed records.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SheetRecord(BaseModel):
    """Immutable value record.

    Attributes are snake_case in Python and camelCase on the wire
    (script parameters, JSON payloads and exported CSV headers).
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_wire(self) -> dict:
        """camelCase dict of this record, None values omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)
