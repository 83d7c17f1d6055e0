"""
Shared pydantic building blocks for stored records.

Every resource kind stores records with the same envelope: a generated
``id``, a ``createdAt`` timestamp assigned on creation and an
``updatedAt`` timestamp that stays ``null`` until the first update.
JSON payloads use camelCase keys; snake_case attribute names are also
accepted on input so that Python callers can construct models
naturally.
"""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

# Required text: surrounding whitespace is stripped and the result must
# not be empty.
NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# Optional free text is stripped but may be empty.
Text = Annotated[str, StringConstraints(strip_whitespace=True)]

# Amounts and prices must be strictly positive and finite.
PositiveFloat = Annotated[float, Field(gt=0, allow_inf_nan=False)]
PositiveInt = Annotated[int, Field(gt=0)]


class CamelModel(BaseModel):
    """Base model serialising field names as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecordBase(CamelModel):
    """Envelope fields common to all stored records."""

    id: str = Field(..., description="Identifier assigned by the store on creation")
    created_at: datetime = Field(..., description="Creation time (UTC)")
    updated_at: Optional[datetime] = Field(None, description="Time of the last update (UTC), null if never updated")
