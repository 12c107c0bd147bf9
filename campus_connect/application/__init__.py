"""Application layer: request/response DTOs, use cases and presentation services."""
