"""AthleteProfile domain entity: the submitted form snapshot (sport, body metrics, injuries, goal)."""
from dataclasses import dataclass
from typing import Dict, Union

from coach.utilities.constants import FORM_FIELDS


def _clean(value) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def _as_number(text: str, integer: bool = False) -> Union[int, float, str]:
    """Parse numeric form text for storage; anything unparsable is kept as typed."""
    try:
        number = float(text)
    except (TypeError, ValueError):
        return text
    if number.is_integer():
        return int(number)
    return text if integer else number


@dataclass(frozen=True)
class AthleteProfile:
    sport: str
    age: str
    height: str
    weight: str
    injuries: str
    goal: str

    def __str__(self) -> str:
        return f"{self.sport} • {self.age} years • {self.height}cm • {self.weight}kg"

    @staticmethod
    def from_form(data: Dict[str, object]) -> "AthleteProfile":
        '''Creates a profile from form values (strings or numbers). Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return AthleteProfile(**{field: _clean(d.get(field)) for field in FORM_FIELDS})

    def to_form(self) -> Dict[str, str]:
        return {field: getattr(self, field) for field in FORM_FIELDS}

    def to_record(self) -> Dict[str, object]:
        '''Converts the profile to the record store's field layout.'''
        return {
            "sport": self.sport,
            "age": _as_number(self.age, integer=True),
            "height": _as_number(self.height),
            "weight": _as_number(self.weight),
            "injuries": self.injuries,
            "goal": self.goal,
        }
