"""
Persistence-agnostic description of a relationship change.

A mutator never writes anything itself. It returns a ``Mutation`` holding the
next state of the entity, the side effects a store must apply to reach that
state, and the guards that must still hold at write time. A store applies the
effects to the one owning document in a single atomic write filtered by the
guards; if the guards no longer hold, ``guard_error`` is raised instead.
"""

# Standard library imports
from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, TypeVar, Union

# Local application imports
from ..exceptions import CampusConnectError


T = TypeVar("T")


# -----------------------------------------------------------------------------
# Side effects
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class AddToSet:
    """Add ``value`` to the array ``field`` unless already present"""
    field: str
    value: Any


@dataclass(frozen=True)
class Pull:
    """
    Remove matching elements from the array ``field``.

    With ``match_key`` set, elements are sub-documents and match when their
    ``match_key`` equals ``value``.
    """
    field: str
    value: Any
    match_key: Optional[str] = None


@dataclass(frozen=True)
class Push:
    """Append ``value`` to the array ``field``"""
    field: str
    value: Any


@dataclass(frozen=True)
class SetField:
    field: str
    value: Any


SideEffect = Union[AddToSet, Pull, Push, SetField]


# -----------------------------------------------------------------------------
# Guards
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class NotContains:
    """The array ``field`` must not contain ``value``"""
    field: str
    value: Any


@dataclass(frozen=True)
class Contains:
    """The array ``field`` must contain ``value``"""
    field: str
    value: Any


@dataclass(frozen=True)
class Equals:
    field: str
    value: Any


@dataclass(frozen=True)
class MaxItems:
    """The array ``field`` must currently hold fewer than ``limit`` elements"""
    field: str
    limit: int


Guard = Union[NotContains, Contains, Equals, MaxItems]


@dataclass
class Mutation(Generic[T]):
    """Next entity state plus the effects and guards needed to persist it"""
    entity: T
    effects: List[SideEffect] = field(default_factory=list)
    guards: List[Guard] = field(default_factory=list)
    guard_error: Optional[CampusConnectError] = None

    @property
    def changed(self) -> bool:
        return bool(self.effects)
