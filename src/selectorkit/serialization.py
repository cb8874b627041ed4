"""JSON persistence for selector trees.

Trees are stored structurally, not as CSS text. Loading replays every part
through the fluent methods, so a stored tree is validated again on the way in.
"""

from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path
from typing import Any

from selectorkit.errors import SerializationError
from selectorkit.selector.builder import SelectorBuilder
from selectorkit.selector.model import CombinedSelector, CompoundSelector, Selector

__all__ = ["to_dict", "to_json", "from_dict", "from_json", "save", "load"]

_SINGLE_FIELDS = ("type", "id", "attr", "pseudo_element")
_MULTI_FIELDS = ("classes", "pseudo_classes")


def to_dict(node: Selector) -> dict[str, Any]:
    """Convert a selector tree into plain JSON-compatible data."""
    root: dict[str, Any] = {}
    # (node, parent dict, key in parent); walked with a stack for deep trees
    stack: list[tuple[Selector, dict[str, Any], str]] = [(node, root, "node")]
    while stack:
        current, parent, key = stack.pop()
        if isinstance(current, CompoundSelector):
            parent[key] = {
                "kind": "compound",
                "type": current.type_part,
                "id": current.id_part,
                "classes": list(current.class_parts),
                "attr": current.attr_part,
                "pseudo_classes": list(current.pseudo_class_parts),
                "pseudo_element": current.pseudo_element_part,
            }
        elif isinstance(current, CombinedSelector):
            data: dict[str, Any] = {
                "kind": "combined",
                "combinator": str(current.combinator),
                "collapse_descendant": current.collapse_descendant,
                "left": None,
                "right": None,
            }
            parent[key] = data
            stack.append((current.right, data, "right"))
            stack.append((current.left, data, "left"))
        else:
            raise SerializationError(f"Cannot serialise {type(current).__name__}")
    return root["node"]


def to_json(node: Selector, indent: int | None = None) -> str:
    return json.dumps(to_dict(node), indent=indent)


def from_dict(data: Any, builder: SelectorBuilder | None = None) -> Selector:
    """Rebuild a selector tree from :func:`to_dict` output.

    Combined nodes are joined through *builder*, so strict combinator checks
    apply. A stored ``collapse_descendant`` wins over the builder's setting;
    trees without one take the builder's.
    """
    builder = builder or SelectorBuilder()
    built: list[Selector] = []
    # ("visit", data) expands a node; ("join", data) combines the last two built
    stack: list[tuple[str, Any]] = [("visit", data)]
    while stack:
        action, item = stack.pop()
        if action == "join":
            right = built.pop()
            left = built.pop()
            combined = builder.combine(left, item["combinator"], right)
            if "collapse_descendant" in item:
                combined = replace(
                    combined, collapse_descendant=item["collapse_descendant"]
                )
            built.append(combined)
            continue

        if not isinstance(item, dict):
            raise SerializationError(f"Expected an object, got {type(item).__name__}")
        kind = item.get("kind")
        if kind == "compound":
            built.append(_compound_from_dict(item))
        elif kind == "combined":
            _check_combined(item)
            stack.append(("join", item))
            stack.append(("visit", item["right"]))
            stack.append(("visit", item["left"]))
        else:
            raise SerializationError(f"Unknown selector kind: {kind!r}")
    return built.pop()


def _check_combined(data: dict[str, Any]) -> None:
    if not isinstance(data.get("combinator"), str):
        raise SerializationError("Combined selector needs a string 'combinator'")
    if "left" not in data or "right" not in data:
        raise SerializationError("Combined selector needs 'left' and 'right'")
    if not isinstance(data.get("collapse_descendant", False), bool):
        raise SerializationError("Field 'collapse_descendant' must be a boolean")


def _compound_from_dict(data: dict[str, Any]) -> CompoundSelector:
    for key in _SINGLE_FIELDS:
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise SerializationError(f"Field {key!r} must be a string or null")
    for key in _MULTI_FIELDS:
        values = data.get(key, [])
        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            raise SerializationError(f"Field {key!r} must be a list of strings")

    node = CompoundSelector()
    if data.get("type") is not None:
        node.element(data["type"])
    if data.get("id") is not None:
        node.id(data["id"])
    for token in data.get("classes", []):
        node.class_(token)
    if data.get("attr") is not None:
        node.attr(data["attr"])
    for token in data.get("pseudo_classes", []):
        node.pseudo_class(token)
    if data.get("pseudo_element") is not None:
        node.pseudo_element(data["pseudo_element"])
    return node


def from_json(text: str, builder: SelectorBuilder | None = None) -> Selector:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid JSON: {exc}") from exc
    return from_dict(data, builder)


def save(node: Selector, path: Path) -> None:
    """Serialise *node* to JSON and write it to *path*."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(node, indent=2), encoding="utf-8")


def load(path: Path, builder: SelectorBuilder | None = None) -> Selector:
    """Read a selector tree previously written by :func:`save`."""
    return from_json(path.read_text(encoding="utf-8"), builder)
