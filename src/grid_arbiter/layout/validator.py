"""Structural validation for layouts arriving from outside the engine.

The engine assumes well-formed input and never re-validates. Raw item
mappings are checked here first: geometry fields must be numbers, ``static``
must be a boolean when present, and ids must be unique.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from grid_arbiter.exceptions import LayoutValidationError
from grid_arbiter.layout.item import GridItem, Layout

GEOMETRY_FIELDS = ("x", "y", "w", "h")


@dataclass
class ValidationResult:
    """Result of layout validation."""

    valid: bool = True
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add_error(self, msg: str) -> None:
        self.errors.append(msg)
        self.valid = False

    def add_warning(self, msg: str) -> None:
        self.warnings.append(msg)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_layout(raw: Any, context_name: str = "Layout") -> ValidationResult:
    """Check raw layout data without constructing any items."""
    result = ValidationResult()

    if not isinstance(raw, list):
        result.add_error(f"{context_name} must be a list.")
        return result

    seen: set[str] = set()
    for idx, item in enumerate(raw):
        prefix = f"{context_name}[{idx}]"
        if not isinstance(item, Mapping):
            result.add_error(f"{prefix} must be a mapping.")
            continue

        for name in GEOMETRY_FIELDS:
            if not _is_number(item.get(name)):
                result.add_error(f"{prefix}.{name} must be a number!")
            elif isinstance(item[name], float) and not item[name].is_integer():
                result.add_error(f"{prefix}.{name} must be a whole number of grid units.")

        if "static" in item and not isinstance(item["static"], bool):
            result.add_error(f"{prefix}.static must be a boolean!")

        item_id = item.get("i")
        if item_id is None or item_id == "":
            result.add_error(f"{prefix}.i is required.")
            continue
        item_id = str(item_id)
        if item_id in seen:
            result.add_error(f"{prefix}.i '{item_id}' is not unique.")
        seen.add(item_id)

        if _is_number(item.get("w")) and item["w"] <= 0:
            result.add_warning(f"{prefix}: w is {item['w']}, the item has no area.")
        if _is_number(item.get("h")) and item["h"] <= 0:
            result.add_warning(f"{prefix}: h is {item['h']}, the item has no area.")

    return result


def load_layout(raw: Any, context_name: str = "Layout") -> Layout:
    """Validate raw data and build GridItems, raising on any structural error."""
    result = validate_layout(raw, context_name)
    if not result.valid:
        raise LayoutValidationError(context_name, result.errors)

    try:
        return [GridItem.model_validate(dict(item)) for item in raw]
    except ValidationError as e:
        raise LayoutValidationError(context_name, [str(err["msg"]) for err in e.errors()]) from e


def check_unique_ids(layout: Layout, context_name: str = "Layout") -> None:
    """Raise if two items in an already built layout share an id."""
    seen: set[str] = set()
    dupes = []
    for item in layout:
        if item.i in seen:
            dupes.append(f"{context_name}: duplicate id '{item.i}'.")
        seen.add(item.i)
    if dupes:
        raise LayoutValidationError(context_name, dupes)
