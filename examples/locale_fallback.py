"""resourcetable Example - Locale Fallback Chains.

Demonstrates resource tables discovered by naming convention and linked
into fallback chains.

Scenarios covered:
1. Partial French translations falling back to the neutral table
2. A missing intermediate level (de absent, de-AT present)
3. The active locale taken from a context override

Python 3.13+.
"""

from __future__ import annotations

from resourcetable import MappingTable, ResourceTable, active_locale, get_table


class Shop:
    """Caller: tables are searched in this module's namespace."""


class Resources:
    class Labels(MappingTable, ResourceTable):
        locale = ""
        entries = {"cart": "Cart", "checkout": "Checkout", "hat": "Hat"}

    class Labels_fr(MappingTable, ResourceTable):  # noqa: N801
        locale = "fr"
        entries = {"cart": "Panier"}

    class Labels_fr_CA(MappingTable, ResourceTable):  # noqa: N801
        locale = "fr-CA"
        entries = {"hat": "Tuque"}

    class Prompts(MappingTable, ResourceTable):
        locale = ""
        entries = {"confirm": "Are you sure?"}

    class Prompts_de_AT(MappingTable, ResourceTable):  # noqa: N801
        locale = "de-AT"
        entries = {"confirm": "Sind Sie sicher?"}


def example_1_partial_translation() -> dict[str, object]:
    """Example 1: fr-FR resolves Labels_fr, then the neutral Labels."""
    print("=" * 60)
    print("Example 1: Partial Translation (fr-FR)")
    print("=" * 60)

    labels = get_table(Shop, "Resources.Labels", "fr-FR")
    assert labels is not None
    values = {key: labels[key] for key in sorted(labels.keys())}
    for key, value in values.items():
        print(f"  {key:10} {value}")
    return values


def example_2_missing_level() -> list[str]:
    """Example 2: de-AT links to the neutral table without a de level."""
    print("\n" + "=" * 60)
    print("Example 2: Missing Intermediate Level (de-AT)")
    print("=" * 60)

    prompts = get_table(Shop, "Resources.Prompts", "de-AT")
    assert prompts is not None
    chain = [type(table).__qualname__ for table in prompts.chain()]
    print(f"  chain: {' -> '.join(chain)}")
    print(f"  confirm: {prompts['confirm']}")
    return chain


def example_3_active_locale() -> object:
    """Example 3: Locale omitted, taken from the active-locale override."""
    print("\n" + "=" * 60)
    print("Example 3: Active Locale (fr-CA)")
    print("=" * 60)

    with active_locale("fr-CA"):
        labels = get_table(Shop, "Resources.Labels")
    assert labels is not None
    print(f"  hat: {labels['hat']}, cart: {labels['cart']}, depth: {labels.depth}")
    return labels["hat"]


if __name__ == "__main__":
    example_1_partial_translation()
    example_2_missing_level()
    example_3_active_locale()
