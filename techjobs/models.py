"""
Job record model.

Attribute values (employer, location, position type, core competency) are
shared between jobs: every job whose raw text for a category matches
case-insensitively points at the same instance.
"""

from dataclasses import dataclass

from .normalize import fold


class AttributeValue:
    """Named value of one job attribute category."""

    __slots__ = ("_value",)

    def __init__(self, value: str):
        object.__setattr__(self, "_value", value)

    @property
    def value(self) -> str:
        return self._value

    @property
    def key(self) -> str:
        """Case-folded text used for dedup lookup."""
        return fold(self._value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.key == other.key

    def __hash__(self):
        return hash((type(self).__name__, self.key))

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


class Employer(AttributeValue):
    __slots__ = ()


class Location(AttributeValue):
    __slots__ = ()


class PositionType(AttributeValue):
    __slots__ = ()


class CoreCompetency(AttributeValue):
    __slots__ = ()


@dataclass(frozen=True, eq=False)
class Job:
    id: int
    name: str
    employer: Employer
    location: Location
    position_type: PositionType
    core_competency: CoreCompetency

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "employer": str(self.employer),
            "location": str(self.location),
            "positionType": str(self.position_type),
            "coreCompetency": str(self.core_competency),
        }
