"""
Translation of a domain ``Mutation`` into one guarded MongoDB update.

The guards become extra filter clauses next to ``_id`` and the side effects
become update operators, so the precondition check and the write happen in a
single atomic ``find_one_and_update`` on the owning document.
"""

# Standard library imports
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

# Local application imports
from ...domain.models.mutation import (
    AddToSet,
    Contains,
    Equals,
    MaxItems,
    Mutation,
    NotContains,
    Pull,
    Push,
    SetField,
)


UPDATED_AT = "updatedAt"

Encoder = Callable[[str, Any], Any]


def _identity(field: str, value: Any) -> Any:
    return value


def build_guard_filter(mutation: Mutation, encode: Encoder = _identity) -> Dict[str, Any]:
    """Filter clauses that only match while every guard still holds"""
    clauses: List[Dict[str, Any]] = []
    for guard in mutation.guards:
        if isinstance(guard, NotContains):
            clauses.append({guard.field: {"$ne": encode(guard.field, guard.value)}})
        elif isinstance(guard, (Contains, Equals)):
            clauses.append({guard.field: encode(guard.field, guard.value)})
        elif isinstance(guard, MaxItems):
            # Fewer than ``limit`` items means the element at index limit-1 does not exist
            clauses.append({f"{guard.field}.{guard.limit - 1}": {"$exists": False}})
        else:
            raise TypeError(f"Unsupported guard: {guard!r}")

    if not clauses:
        return {}
    if len(clauses) == 1:
        return clauses[0]
    return {"$and": clauses}


def build_update(
    mutation: Mutation,
    now: datetime,
    encode: Encoder = _identity,
    key_aliases: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """
    Update document applying every side effect of ``mutation``.

    ``encode(field, value)`` converts domain values to stored values (ids to
    ObjectId, embedded entities to sub-documents). ``key_aliases`` renames the
    match key of sub-document pulls, e.g. ``{"id": "_id"}``. Setting a field to
    None unsets it. ``updatedAt`` is always refreshed.
    """
    key_aliases = key_aliases or {}
    add_to_set: Dict[str, List[Any]] = {}
    pull: Dict[str, Any] = {}
    push: Dict[str, List[Any]] = {}
    set_fields: Dict[str, Any] = {}
    unset_fields: Dict[str, str] = {}

    for effect in mutation.effects:
        if isinstance(effect, AddToSet):
            add_to_set.setdefault(effect.field, []).append(encode(effect.field, effect.value))
        elif isinstance(effect, Pull):
            value = encode(effect.field, effect.value)
            if effect.match_key:
                value = {key_aliases.get(effect.match_key, effect.match_key): value}
            pull[effect.field] = value
        elif isinstance(effect, Push):
            push.setdefault(effect.field, []).append(encode(effect.field, effect.value))
        elif isinstance(effect, SetField):
            if effect.value is None:
                unset_fields[effect.field] = ""
            else:
                set_fields[effect.field] = encode(effect.field, effect.value)
        else:
            raise TypeError(f"Unsupported side effect: {effect!r}")

    set_fields[UPDATED_AT] = now
    update: Dict[str, Any] = {"$set": set_fields}
    if unset_fields:
        update["$unset"] = unset_fields
    if add_to_set:
        update["$addToSet"] = {field: _single_or_each(values) for field, values in add_to_set.items()}
    if push:
        update["$push"] = {field: _single_or_each(values) for field, values in push.items()}
    if pull:
        update["$pull"] = pull
    return update


def _single_or_each(values: List[Any]) -> Any:
    return values[0] if len(values) == 1 else {"$each": values}


def to_update_parts(
    mutation: Mutation,
    now: datetime,
    encode: Encoder = _identity,
    key_aliases: Optional[Mapping[str, str]] = None,
) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """Guard filter and update document for one mutation"""
    return build_guard_filter(mutation, encode), build_update(mutation, now, encode, key_aliases)
