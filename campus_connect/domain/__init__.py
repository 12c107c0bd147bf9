"""Domain layer: entities, invariants, relationship mutators and repository contracts."""
