# Role: Canonical record of the meal being reported (person, meal, food, place, time). This is the typed view of
# the platform's session attributes. merge() applies one turn's slot values on top of what is already remembered.

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel

# Key line: fixed priority order, also the order fields are resolved in.
MEAL_FIELDS: Tuple[str, ...] = ("person", "meal", "food", "place", "time")


def _clean(value: Any) -> Optional[str]:
    # Slot values are taken verbatim; only missing/empty values count as "not supplied".
    if isinstance(value, str) and value != "":
        return value
    return None


class MealReport(BaseModel):
    person: Optional[str] = None
    meal: Optional[str] = None
    food: Optional[str] = None
    place: Optional[str] = None
    time: Optional[str] = None

    @classmethod
    def from_values(cls, values: Optional[Mapping[str, Any]]) -> "MealReport":
        # Unknown keys (other attributes the platform may carry) are ignored.
        values = values or {}
        return cls(**{field: _clean(values.get(field)) for field in MEAL_FIELDS})

    def to_attributes(self) -> Dict[str, str]:
        return {field: getattr(self, field) for field in MEAL_FIELDS if getattr(self, field) is not None}

    def merge(self, supplied: "MealReport") -> "MealReport":
        # 1) Newly supplied value wins and overwrites the stored one
        # 2) Otherwise keep the stored value (never cleared by an omitted slot)
        merged = {}
        for field in MEAL_FIELDS:
            new_value = getattr(supplied, field)
            merged[field] = new_value if new_value is not None else getattr(self, field)
        return MealReport(**merged)

    def missing(self, field: str) -> bool:
        return getattr(self, field) is None
