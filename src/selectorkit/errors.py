"""Error hierarchy for the selector builder."""

from __future__ import annotations

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base error for all selectorkit errors."""

    def __init__(
        self,
        message: str,
        *,
        part: str | None = None,
        token: str | None = None,
    ) -> None:
        super().__init__(message)
        self.part = part
        self.token = token


class DuplicatePartError(SelectorError):
    """A single-occurrence part (type, id, attribute, pseudo-element) was set twice."""

    def __init__(self, message: str = DUPLICATE_MESSAGE, **kwargs: str | None) -> None:
        super().__init__(message, **kwargs)


class OrderError(SelectorError):
    """A part was added after a part from a later category."""

    def __init__(
        self,
        message: str = ORDER_MESSAGE,
        *,
        blocking: str | None = None,
        **kwargs: str | None,
    ) -> None:
        super().__init__(message, **kwargs)
        self.blocking = blocking


class InvalidCombinatorError(SelectorError):
    """Combinator token outside ' ', '>', '+', '~' (strict mode only)."""


class SerializationError(SelectorError):
    """A serialized selector tree is malformed."""
