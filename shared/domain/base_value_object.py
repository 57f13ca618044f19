"""
Base value object class for DDD.
"""
from abc import ABC
from dataclasses import astuple, dataclass
from typing import Any


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base value object class.
    Value objects are immutable and compared by their fields.
    """

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return astuple(self) == astuple(other)

    def __hash__(self) -> int:
        return hash(astuple(self))
