"""Property-based tests for discovered fallback chains.

Each example declares its own tables under a fresh namespace, builds the
chain with get_table() and checks it against a model computed from the
layout.
"""

from __future__ import annotations

import uuid

from hypothesis import event, given

from resourcetable import Found, get_table
from resourcetable.discovery import candidate_names
from tests.helpers.tables import declare_table
from tests.strategies import ChainLayout, chain_layouts, locale_codes


def _declare(layout: ChainLayout) -> str:
    namespace = f"prop_{uuid.uuid4().hex[:12]}"
    names = candidate_names(namespace, "Messages", layout.locale)
    for name, entries, level in zip(names, layout.levels, range(len(names)), strict=True):
        if entries is not None:
            locale = "-".join(layout.subtags[:level])
            declare_table(name, entries, locale)
    return namespace


@given(layout=chain_layouts())
def test_property_chain_shape(layout: ChainLayout) -> None:
    """Property: one node per existing level, ordered most specific first."""
    namespace = _declare(layout)

    head = get_table(namespace, "Messages", layout.locale)

    if not layout.present:
        event("outcome=not_found")
        assert head is None
        return
    assert head is not None
    tables = list(head.chain())
    assert len(tables) == len(layout.present)
    assert len(tables) <= 1 + len(layout.subtags)
    specificity = [len(t.locale.split("-")) if t.locale else 0 for t in tables]
    assert specificity == sorted(specificity, reverse=True)
    assert len(set(specificity)) == len(specificity)


@given(layout=chain_layouts())
def test_property_override_and_union(layout: ChainLayout) -> None:
    """Property: lookup returns the most specific value; keys is the union."""
    namespace = _declare(layout)

    head = get_table(namespace, "Messages", layout.locale)
    if head is None:
        return

    expected: dict[str, object] = {}
    for entries in reversed(layout.present):
        expected.update(entries)

    assert head.keys() == frozenset(expected)
    for key, value in expected.items():
        assert head.lookup(key) == Found(value)
    event(f"keys={len(expected)}")


@given(code=locale_codes())
def test_property_candidate_count(code: tuple[str, tuple[str, ...]]) -> None:
    """Property: one candidate per subtag plus the neutral name."""
    locale, subtags = code
    names = candidate_names("ns", "Base", locale)

    assert len(names) == 1 + len(subtags)
    assert names[0] == "ns.Base"
    assert all(later.startswith(f"{earlier}_") for earlier, later in zip(names, names[1:]))
