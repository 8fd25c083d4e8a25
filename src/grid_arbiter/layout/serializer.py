"""Read and write layouts as YAML or JSON text.

Documents are either a bare list of items or a mapping with a ``layout`` key.
Items use the camelCase names of the grid front end (``minW``,
``isDraggable``); snake_case names are accepted on input too.
"""

from __future__ import annotations

import json
from typing import Any

import yaml

from grid_arbiter.exceptions import SerializationError
from grid_arbiter.layout.item import GridItem, Layout, Placeholder
from grid_arbiter.layout.validator import load_layout


class LayoutSerializer:
    """Convert layouts to and from text documents."""

    @staticmethod
    def from_yaml(yaml_str: str, context_name: str = "Layout") -> Layout:
        try:
            data = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise SerializationError(f"Invalid YAML: {e}") from e
        return LayoutSerializer.from_data(data, context_name)

    @staticmethod
    def from_json(json_str: str, context_name: str = "Layout") -> Layout:
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise SerializationError(f"Invalid JSON: {e}") from e
        return LayoutSerializer.from_data(data, context_name)

    @staticmethod
    def from_data(data: Any, context_name: str = "Layout") -> Layout:
        """Build a validated layout from already-parsed data."""
        if data is None:
            raise SerializationError("Invalid layout document: empty")
        if isinstance(data, dict):
            if "layout" not in data:
                raise SerializationError("Invalid layout document: missing 'layout' key")
            data = data["layout"]
        return load_layout(data, context_name)

    @staticmethod
    def item_to_dict(item: GridItem) -> dict[str, Any]:
        """Dump one item, omitting unset optionals and the transient flag."""
        data = item.model_dump(by_alias=True, exclude_none=True, exclude={"moved"})
        if not data.get("static"):
            data.pop("static", None)
        return data

    @staticmethod
    def to_dicts(layout: Layout) -> list[dict[str, Any]]:
        return [LayoutSerializer.item_to_dict(item) for item in layout]

    @staticmethod
    def to_yaml(layout: Layout) -> str:
        data = {"layout": LayoutSerializer.to_dicts(layout)}
        return yaml.dump(data, default_flow_style=False, sort_keys=False, width=120)

    @staticmethod
    def to_json(layout: Layout) -> str:
        return json.dumps({"layout": LayoutSerializer.to_dicts(layout)}, indent=2)

    @staticmethod
    def placeholder_to_dict(placeholder: Placeholder) -> dict[str, Any]:
        return {
            "i": placeholder.i,
            "x": placeholder.x,
            "y": placeholder.y,
            "w": placeholder.w,
            "h": placeholder.h,
            "pos": placeholder.pos.value,
        }
