"""Shared pieces of the in-memory record models."""
from typing import Any, Annotated, Optional, Union
from pydantic import BaseModel, BeforeValidator


def parse_id(value: Any) -> Optional[int]:
    """Numeric interpretation of an identifier, or None when it has none.

    GraphQL ``ID`` values arrive as strings, so ``"3"`` and ``3`` name the
    same record while ``"abc"`` names none.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if number.is_integer() else None
    return None


def _normalize_key(value: Any) -> Any:
    key = parse_id(value)
    return value if key is None else key


# Foreign keys are not checked against their target collection; numeric
# values are stored as ints, anything else is kept verbatim and never matches.
ForeignKey = Annotated[Union[int, str], BeforeValidator(_normalize_key)]


class Record(BaseModel):
    """One stored entity: a generated integer id plus entity fields."""

    id: int

    model_config = {"frozen": True, "populate_by_name": True}
