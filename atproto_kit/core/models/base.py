"""
Base Model Classes

Provides the base class for all lexicon models.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class LexiconModel(BaseModel):
    """
    Base lexicon model.

    Attributes are snake_case in Python and camelCase on the wire.
    Unknown fields sent by newer servers are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore"
    )

    def to_payload(self) -> Dict[str, Any]:
        """Encode for the wire; unset optional fields are omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def __repr__(self) -> str:
        """String representation."""
        fields = ", ".join(
            f"{name}={value!r}"
            for name, value in self.__dict__.items()
            if value is not None
        )
        return f"<{self.__class__.__name__}({fields})>"
