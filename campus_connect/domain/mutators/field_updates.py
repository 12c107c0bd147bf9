# Standard library imports
from dataclasses import replace
from typing import Any, Dict, Mapping, TypeVar

# Local application imports
from ..exceptions import ValidationError
from ..models.mutation import Mutation, SetField


T = TypeVar("T")


def update_fields(entity: T, changes: Dict[str, Any], field_names: Mapping[str, str]) -> Mutation[T]:
    """
    Build a plain field update.

    ``changes`` is keyed by entity attribute; ``field_names`` is the allow-list
    mapping each updatable attribute to its stored field name. The whole next
    state is re-validated before any effect is produced, so cross-field rules
    see new and old values together.

    Raises:
        ValidationError: If nothing allow-listed is changed or the next state is invalid
    """
    if not changes or any(attribute not in field_names for attribute in changes):
        raise ValidationError(
            "No valid fields provided for update",
            details={"allowedFields": list(field_names.values())},
        )

    updated = replace(entity, **changes)
    effects = [
        SetField(field_names[attribute], getattr(updated, attribute))
        for attribute in changes
        if getattr(updated, attribute) != getattr(entity, attribute)
    ]
    return Mutation(entity=updated, effects=effects)
