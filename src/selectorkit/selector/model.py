"""Selector model: compound selectors, combined selectors and their vocabulary.

A compound selector targets one element:

    element#id.class[attr]:pseudo-class::pseudo-element

Parts must be added in that order. Type, id, attribute and pseudo-element may
occur at most once; classes and pseudo-classes may repeat. A combined
selector joins two selectors with a combinator.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum, StrEnum
from typing import Protocol, Union

from selectorkit.errors import DuplicatePartError, OrderError

logger = logging.getLogger(__name__)


class Combinator(StrEnum):
    """Structural relationship between two selectors."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


COMBINATORS = frozenset(c.value for c in Combinator)


class Part(StrEnum):
    """Category of a compound selector part."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"


class Stage(IntEnum):
    """Furthest category touched on a compound selector.

    Type and id share the first stage.
    """

    NONE = 0
    TYPE_ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5


class SelectorNode(Protocol):
    """Anything that renders to selector text."""

    def stringify(self) -> str: ...


class CompoundSelector:
    """A single, non-combined selector built up part by part.

    Every part method mutates the selector in place and returns it, so calls
    can be chained. A rejected call raises before touching any field.
    """

    def __init__(self) -> None:
        self.type_part: str | None = None
        self.id_part: str | None = None
        self.class_parts: list[str] = []
        self.attr_part: str | None = None
        self.pseudo_class_parts: list[str] = []
        self.pseudo_element_part: str | None = None

    # --- part methods ---------------------------------------------------------

    def element(self, token: str) -> CompoundSelector:
        """Set the element type, e.g. ``div``."""
        if self.type_part is not None:
            self._duplicate(Part.ELEMENT, token)
        self._check_order(
            Part.ELEMENT,
            token,
            Part.ID,
            Part.CLASS,
            Part.ATTRIBUTE,
            Part.PSEUDO_CLASS,
            Part.PSEUDO_ELEMENT,
        )
        self.type_part = token
        return self

    def id(self, token: str) -> CompoundSelector:
        """Set the id, rendered as ``#token``."""
        if self.id_part is not None:
            self._duplicate(Part.ID, token)
        self._check_order(
            Part.ID,
            token,
            Part.CLASS,
            Part.ATTRIBUTE,
            Part.PSEUDO_CLASS,
            Part.PSEUDO_ELEMENT,
        )
        self.id_part = token
        return self

    def class_(self, token: str) -> CompoundSelector:
        """Append a class, rendered as ``.token``."""
        self._check_order(
            Part.CLASS, token, Part.ATTRIBUTE, Part.PSEUDO_CLASS, Part.PSEUDO_ELEMENT
        )
        self.class_parts.append(token)
        return self

    def attr(self, token: str) -> CompoundSelector:
        """Set the attribute selector, rendered as ``[token]``."""
        if self.attr_part is not None:
            self._duplicate(Part.ATTRIBUTE, token)
        self._check_order(Part.ATTRIBUTE, token, Part.PSEUDO_CLASS, Part.PSEUDO_ELEMENT)
        self.attr_part = token
        return self

    def pseudo_class(self, token: str) -> CompoundSelector:
        """Append a pseudo-class, rendered as ``:token``."""
        self._check_order(Part.PSEUDO_CLASS, token, Part.PSEUDO_ELEMENT)
        self.pseudo_class_parts.append(token)
        return self

    def pseudo_element(self, token: str) -> CompoundSelector:
        """Set the pseudo-element, rendered as ``::token``."""
        if self.pseudo_element_part is not None:
            self._duplicate(Part.PSEUDO_ELEMENT, token)
        self.pseudo_element_part = token
        return self

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        return "".join(
            [
                self.type_part or "",
                f"#{self.id_part}" if self.id_part is not None else "",
                "".join(f".{c}" for c in self.class_parts),
                f"[{self.attr_part}]" if self.attr_part is not None else "",
                "".join(f":{p}" for p in self.pseudo_class_parts),
                f"::{self.pseudo_element_part}"
                if self.pseudo_element_part is not None
                else "",
            ]
        )

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"CompoundSelector({self.stringify()!r})"

    # --- state ----------------------------------------------------------------

    def has(self, part: Part) -> bool:
        """True if at least one part of the given category is present."""
        if part is Part.ELEMENT:
            return self.type_part is not None
        if part is Part.ID:
            return self.id_part is not None
        if part is Part.CLASS:
            return bool(self.class_parts)
        if part is Part.ATTRIBUTE:
            return self.attr_part is not None
        if part is Part.PSEUDO_CLASS:
            return bool(self.pseudo_class_parts)
        return self.pseudo_element_part is not None

    @property
    def stage(self) -> Stage:
        """The furthest category reached so far."""
        if self.has(Part.PSEUDO_ELEMENT):
            return Stage.PSEUDO_ELEMENT
        if self.has(Part.PSEUDO_CLASS):
            return Stage.PSEUDO_CLASS
        if self.has(Part.ATTRIBUTE):
            return Stage.ATTRIBUTE
        if self.has(Part.CLASS):
            return Stage.CLASS
        if self.has(Part.ELEMENT) or self.has(Part.ID):
            return Stage.TYPE_ID
        return Stage.NONE

    def _check_order(self, part: Part, token: str, *later: Part) -> None:
        for blocking in later:
            if self.has(blocking):
                logger.debug(
                    "Rejected %s %r: %s already present", part, token, blocking
                )
                raise OrderError(part=part.value, token=token, blocking=blocking.value)

    def _duplicate(self, part: Part, token: str) -> None:
        logger.debug("Rejected %s %r: already set", part, token)
        raise DuplicatePartError(part=part.value, token=token)


@dataclass(frozen=True, eq=False)
class CombinedSelector:
    """Two selectors joined by a combinator.

    The combinator is always padded by one space on each side, so the
    descendant combinator renders as three spaces unless
    ``collapse_descendant`` is set.

    Nodes compare by identity; trees can be nested arbitrarily deep, so
    nothing here recurses on the Python stack.
    """

    left: SelectorNode
    combinator: str
    right: SelectorNode
    collapse_descendant: bool = False

    def stringify(self) -> str:
        pieces: list[str] = []
        # items are nodes still to render or separators already rendered
        stack: list[SelectorNode | str] = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                pieces.append(item)
            elif isinstance(item, CombinedSelector):
                stack.append(item.right)
                stack.append(item.separator)
                stack.append(item.left)
            else:
                pieces.append(item.stringify())
        return "".join(pieces)

    @property
    def separator(self) -> str:
        """Text placed between the rendered left and right children."""
        if self.collapse_descendant and self.combinator == Combinator.DESCENDANT:
            return " "
        return f" {self.combinator} "

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"CombinedSelector({self.stringify()!r})"


Selector = Union[CompoundSelector, CombinedSelector]
