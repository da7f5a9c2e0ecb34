"""Base model class for all querykit models with serialization support."""

from typing import Any, Dict
from pydantic import BaseModel, ConfigDict


class QueryKitBaseModel(BaseModel):
    """Base model for all querykit models with built-in serialization.

    Provides common functionality for all querykit models including:
    - Serialization to dictionary via to_dict()
    - Consistent configuration
    - Population by field name or alias
    """
    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        use_enum_values=True,
        validate_assignment=True,
        populate_by_name=True,
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert model to a JSON-compatible dictionary.

        Uses field aliases so the output matches the wire names callers
        decoded the model from.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
