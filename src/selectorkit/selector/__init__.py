from selectorkit.selector.model import (
    Combinator,
    CombinedSelector,
    CompoundSelector,
    Part,
    Selector,
    SelectorNode,
    Stage,
)
from selectorkit.selector.builder import SelectorBuilder

__all__ = [
    "Combinator",
    "CombinedSelector",
    "CompoundSelector",
    "Part",
    "Selector",
    "SelectorBuilder",
    "SelectorNode",
    "Stage",
]
