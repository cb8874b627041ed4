"""CLI command: selectorkit build -- assemble a selector from part words.

Each word is either ``part=value`` or a combinator::

    selectorkit build element=div id=main class=container + element=table id=data

Combinators are ``>``, ``+``, ``~`` and ``descendant`` (the space combinator).
Groups are combined right-nested, which renders the same as any other nesting.
"""

from __future__ import annotations

import sys

import click

from selectorkit.config import BuilderConfig
from selectorkit.errors import SelectorError
from selectorkit.selector.builder import SelectorBuilder
from selectorkit.selector.model import Combinator, CompoundSelector, Selector
from selectorkit.serialization import to_json

_PART_METHODS = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo-class": "pseudo_class",
    "pseudo-element": "pseudo_element",
}

_COMBINATOR_WORDS = {
    "descendant": Combinator.DESCENDANT,
    ">": Combinator.CHILD,
    "+": Combinator.ADJACENT_SIBLING,
    "~": Combinator.GENERAL_SIBLING,
}


def _split_words(words: tuple[str, ...]) -> tuple[list[list[tuple[str, str]]], list[str]]:
    """Split words into compound part lists and the combinators between them."""
    groups: list[list[tuple[str, str]]] = [[]]
    combinators: list[str] = []
    for word in words:
        if word in _COMBINATOR_WORDS:
            if not groups[-1]:
                raise click.BadParameter(
                    f"combinator {word!r} must follow a selector part", param_hint="TOKENS"
                )
            combinators.append(_COMBINATOR_WORDS[word])
            groups.append([])
            continue
        name, sep, value = word.partition("=")
        if not sep or name not in _PART_METHODS:
            raise click.BadParameter(
                f"{word!r} is not part=value or a combinator", param_hint="TOKENS"
            )
        groups[-1].append((name, value))
    if not groups[-1]:
        raise click.BadParameter("selector cannot end with a combinator", param_hint="TOKENS")
    return groups, combinators


def assemble(words: tuple[str, ...], builder: SelectorBuilder) -> Selector:
    """Build a selector tree from CLI words."""
    groups, combinators = _split_words(words)
    compounds: list[CompoundSelector] = []
    for parts in groups:
        name, value = parts[0]
        node = getattr(builder, _PART_METHODS[name])(value)
        for name, value in parts[1:]:
            getattr(node, _PART_METHODS[name])(value)
        compounds.append(node)

    result: Selector = compounds[-1]
    for node, combinator in zip(reversed(compounds[:-1]), reversed(combinators)):
        result = builder.combine(node, combinator, result)
    return result


@click.command()
@click.argument("tokens", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Print the selector tree as JSON.")
@click.option("--strict", is_flag=True, help="Reject unknown combinators.")
@click.option(
    "--collapse-descendant",
    is_flag=True,
    help="Render the descendant combinator as a single space.",
)
def build(
    tokens: tuple[str, ...], as_json: bool, strict: bool, collapse_descendant: bool
) -> None:
    """Build a selector from part=value words and combinators and print it."""
    builder = SelectorBuilder(
        BuilderConfig(strict_combinators=strict, collapse_descendant=collapse_descendant)
    )
    try:
        node = assemble(tokens, builder)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(to_json(node, indent=2))
    else:
        click.echo(node.stringify())
