"""Facade for starting and combining selectors.

Example:
    combine(
        element("div").id("main").class_("container"),
        "+",
        element("table").id("data"),
    ).stringify()
    # -> 'div#main.container + table#data'
"""

from __future__ import annotations

import logging

from selectorkit.config import BuilderConfig
from selectorkit.errors import InvalidCombinatorError
from selectorkit.selector.model import (
    COMBINATORS,
    CombinedSelector,
    CompoundSelector,
    SelectorNode,
)

__all__ = [
    "SelectorBuilder",
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Entry points that each return a fresh, independent selector."""

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or BuilderConfig()

    def element(self, token: str) -> CompoundSelector:
        return CompoundSelector().element(token)

    def id(self, token: str) -> CompoundSelector:
        return CompoundSelector().id(token)

    def class_(self, token: str) -> CompoundSelector:
        return CompoundSelector().class_(token)

    def attr(self, token: str) -> CompoundSelector:
        return CompoundSelector().attr(token)

    def pseudo_class(self, token: str) -> CompoundSelector:
        return CompoundSelector().pseudo_class(token)

    def pseudo_element(self, token: str) -> CompoundSelector:
        return CompoundSelector().pseudo_element(token)

    def combine(
        self, left: SelectorNode, combinator: str, right: SelectorNode
    ) -> CombinedSelector:
        """Join two built selectors; neither input is modified.

        Raises InvalidCombinatorError only when ``strict_combinators`` is on.
        """
        if self.config.strict_combinators and combinator not in COMBINATORS:
            logger.debug("Rejected combinator %r", combinator)
            raise InvalidCombinatorError(
                f"Invalid combinator {combinator!r}: expected one of ' ', '>', '+', '~'",
                token=str(combinator),
            )
        return CombinedSelector(
            left=left,
            combinator=str(combinator),
            right=right,
            collapse_descendant=self.config.collapse_descendant,
        )


_default = SelectorBuilder()

element = _default.element
id = _default.id  # noqa: A001
class_ = _default.class_
attr = _default.attr
pseudo_class = _default.pseudo_class
pseudo_element = _default.pseudo_element
combine = _default.combine
