"""Custom exception hierarchy for grid-arbiter."""

from __future__ import annotations


class GridArbiterError(Exception):
    """Base exception for all grid-arbiter errors."""


class LayoutValidationError(GridArbiterError):
    """A layout failed structural validation before reaching the engine."""

    def __init__(self, context_name: str, errors: list[str]):
        self.context_name = context_name
        self.errors = errors
        error_list = "\n  - ".join(errors)
        super().__init__(f"{context_name} validation failed:\n  - {error_list}")


class ItemNotFoundError(GridArbiterError):
    """No item with the given id exists in the layout."""

    def __init__(self, item_id: str, available: list[str] | None = None):
        self.item_id = item_id
        self.available = available
        msg = f"Layout item not found: {item_id}"
        if available:
            from difflib import get_close_matches

            suggestions = get_close_matches(item_id, available, n=3, cutoff=0.4)
            if suggestions:
                msg += f". Did you mean: {', '.join(suggestions)}?"
        super().__init__(msg)


class CascadeLimitError(GridArbiterError):
    """A cascading move exceeded its step budget."""

    def __init__(self, item_id: str, max_steps: int):
        self.item_id = item_id
        self.max_steps = max_steps
        super().__init__(f"Cascade from item '{item_id}' did not settle within {max_steps} steps")


class SerializationError(GridArbiterError):
    """Error reading or writing a layout document."""


class ConfigurationError(GridArbiterError):
    """Missing or invalid configuration."""
