"""selectorkit - fluent builder for CSS compound and complex selectors."""

from selectorkit.config import BuilderConfig
from selectorkit.errors import (
    DuplicatePartError,
    InvalidCombinatorError,
    OrderError,
    SelectorError,
    SerializationError,
)
from selectorkit.selector import (
    Combinator,
    CombinedSelector,
    CompoundSelector,
    Part,
    Selector,
    SelectorBuilder,
    SelectorNode,
    Stage,
)
from selectorkit.selector.builder import (
    attr,
    class_,
    combine,
    element,
    id,
    pseudo_class,
    pseudo_element,
)

__version__ = "0.1.0"

__all__ = [
    "BuilderConfig",
    "Combinator",
    "CombinedSelector",
    "CompoundSelector",
    "DuplicatePartError",
    "InvalidCombinatorError",
    "OrderError",
    "Part",
    "Selector",
    "SelectorBuilder",
    "SelectorError",
    "SelectorNode",
    "SerializationError",
    "Stage",
    "attr",
    "class_",
    "combine",
    "element",
    "id",
    "pseudo_class",
    "pseudo_element",
]
