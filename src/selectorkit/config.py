"""Builder configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuilderConfig:
    """Options for a SelectorBuilder.

    Both flags default to the historical behaviour: combinators are not
    checked, and the descendant combinator renders padded to three spaces.
    """

    strict_combinators: bool = False
    collapse_descendant: bool = False
