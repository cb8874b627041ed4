"""Tests for JSON persistence of selector trees."""

import json
from pathlib import Path

import pytest

from selectorkit import (
    BuilderConfig,
    CombinedSelector,
    CompoundSelector,
    DuplicatePartError,
    InvalidCombinatorError,
    OrderError,
    SelectorBuilder,
    SerializationError,
)
from selectorkit.selector import builder as css
from selectorkit.serialization import from_dict, from_json, load, save, to_dict, to_json


def _compound_dict(**overrides):
    data = {
        "kind": "compound",
        "type": None,
        "id": None,
        "classes": [],
        "attr": None,
        "pseudo_classes": [],
        "pseudo_element": None,
    }
    data.update(overrides)
    return data


# ---------------------------------------------------------------------------
# to_dict / to_json
# ---------------------------------------------------------------------------


class TestToDict:
    def test_compound(self):
        node = css.element("a").class_("x").class_("y").attr("href").pseudo_class("focus")
        assert to_dict(node) == _compound_dict(
            type="a", classes=["x", "y"], attr="href", pseudo_classes=["focus"]
        )

    def test_combined(self):
        node = css.combine(css.element("ul"), ">", css.element("li"))
        data = to_dict(node)
        assert data["kind"] == "combined"
        assert data["combinator"] == ">"
        assert data["left"] == _compound_dict(type="ul")
        assert data["right"] == _compound_dict(type="li")

    def test_to_json_is_valid_json(self):
        node = css.id("main").pseudo_element("before")
        assert json.loads(to_json(node)) == _compound_dict(id="main", pseudo_element="before")

    def test_unknown_node_type(self):
        with pytest.raises(SerializationError):
            to_dict("div")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# from_dict / from_json
# ---------------------------------------------------------------------------


class TestFromDict:
    def test_compound_restored(self):
        node = from_dict(_compound_dict(type="div", id="main", classes=["c"]))
        assert isinstance(node, CompoundSelector)
        assert node.stringify() == "div#main.c"

    def test_combined_restored(self):
        original = css.combine(
            css.element("table").id("data"),
            "~",
            css.combine(css.element("tr"), " ", css.element("td")),
        )
        restored = from_json(to_json(original))
        assert isinstance(restored, CombinedSelector)
        assert restored.stringify() == original.stringify()

    def test_missing_optional_fields_default(self):
        node = from_dict({"kind": "compound", "type": "p"})
        assert node.stringify() == "p"

    def test_restored_node_still_enforces_rules(self):
        node = from_dict(_compound_dict(type="a", pseudo_element="after"))
        with pytest.raises(OrderError):
            node.class_("late")
        with pytest.raises(DuplicatePartError):
            node.pseudo_element("before")

    def test_unknown_kind(self):
        with pytest.raises(SerializationError, match="Unknown selector kind"):
            from_dict({"kind": "weird"})

    def test_non_object(self):
        with pytest.raises(SerializationError):
            from_dict(["compound"])

    def test_wrong_field_type(self):
        with pytest.raises(SerializationError, match="'classes'"):
            from_dict(_compound_dict(classes="not-a-list"))

    def test_non_string_singular_field(self):
        with pytest.raises(SerializationError, match="'id'"):
            from_dict(_compound_dict(id=7))

    def test_combined_missing_child(self):
        with pytest.raises(SerializationError):
            from_dict({"kind": "combined", "combinator": ">", "left": _compound_dict()})

    def test_combined_missing_combinator(self):
        with pytest.raises(SerializationError):
            from_dict(
                {"kind": "combined", "left": _compound_dict(), "right": _compound_dict()}
            )

    def test_invalid_json(self):
        with pytest.raises(SerializationError, match="Invalid JSON"):
            from_json("{not json")

    def test_builder_config_applies(self):
        data = {
            "kind": "combined",
            "combinator": "|",
            "left": _compound_dict(type="a"),
            "right": _compound_dict(type="b"),
        }
        strict = SelectorBuilder(BuilderConfig(strict_combinators=True))
        with pytest.raises(InvalidCombinatorError):
            from_dict(data, strict)
        assert from_dict(data).stringify() == "a | b"


# ---------------------------------------------------------------------------
# Descendant collapsing and deep trees
# ---------------------------------------------------------------------------


class TestCollapseDescendant:
    def test_to_dict_records_flag(self):
        builder = SelectorBuilder(BuilderConfig(collapse_descendant=True))
        node = builder.combine(css.element("ul"), " ", css.element("li"))
        assert to_dict(node)["collapse_descendant"] is True

    def test_round_trip_keeps_rendering(self):
        builder = SelectorBuilder(BuilderConfig(collapse_descendant=True))
        node = builder.combine(css.element("ul"), " ", css.element("li"))
        restored = from_json(to_json(node))
        assert restored.stringify() == "ul li"

    def test_stored_value_overrides_builder(self):
        node = css.combine(css.element("ul"), " ", css.element("li"))
        collapsing = SelectorBuilder(BuilderConfig(collapse_descendant=True))
        assert from_json(to_json(node), collapsing).stringify() == "ul   li"

    def test_missing_value_uses_builder(self):
        data = {
            "kind": "combined",
            "combinator": " ",
            "left": _compound_dict(type="ul"),
            "right": _compound_dict(type="li"),
        }
        collapsing = SelectorBuilder(BuilderConfig(collapse_descendant=True))
        assert from_dict(data, collapsing).stringify() == "ul li"

    def test_non_boolean_rejected(self):
        data = {
            "kind": "combined",
            "combinator": " ",
            "collapse_descendant": "yes",
            "left": _compound_dict(type="ul"),
            "right": _compound_dict(type="li"),
        }
        with pytest.raises(SerializationError, match="collapse_descendant"):
            from_dict(data)


class TestDeepTrees:
    def test_to_dict_and_back_at_depth(self):
        node = css.element("n0")
        for i in range(1, 5000):
            node = css.combine(node, ">", css.element(f"n{i}"))
        data = to_dict(node)
        assert data["right"] == _compound_dict(type="n4999")
        restored = from_dict(data)
        assert restored.stringify() == node.stringify()

    def test_right_nested_keeps_child_order(self):
        node = css.element("n99")
        for i in range(98, -1, -1):
            node = css.combine(css.element(f"n{i}"), "+", node)
        assert from_dict(to_dict(node)).stringify() == " + ".join(
            f"n{i}" for i in range(100)
        )


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------


class TestFiles:
    def test_save_and_load(self, tmp_path: Path):
        node = css.combine(css.element("a").pseudo_class("hover"), "+", css.class_("tip"))
        path = tmp_path / "nested" / "selector.json"
        save(node, path)
        assert path.exists()
        assert load(path).stringify() == "a:hover + .tip"
