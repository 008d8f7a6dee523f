"""Regex-based extraction over PHP source text.

This is the only module that pattern-matches source code. Everything is
best effort: free-form formatting, nested arrays and comments can cause
both misses and spurious hits. The index and query engine only depend on
the three functions below, so a real parser can replace this module.
"""

from __future__ import annotations

import re

from pkgscope.models import RelationshipSet

# recorded once per morphTo() call; the target is resolved at runtime
MORPH_TO_SENTINEL = "(polymorphic)"

# ---------------------------------------------------------------------------
# Config arrays
# ---------------------------------------------------------------------------

# 'components' => [ ... ]  (first closing bracket ends the block)
_ARRAY_BLOCK = r"""['"]{name}['"]\s*=>\s*\[(.*?)\]"""

# 'key' => value
_ARRAY_KEY = re.compile(r"""['"]([^'"\n]+)['"]\s*=>""")


def extract_config_array_keys(text: str, array_name: str) -> list[str]:
    """Return the quoted keys of ``'<array_name>' => [ 'key' => ... ]``.

    Args:
        text: PHP config file contents
        array_name: Name of the top-level config entry

    Returns:
        Keys in source order, or an empty list if the array is absent
    """
    block = re.search(
        _ARRAY_BLOCK.format(name=re.escape(array_name)), text, re.DOTALL
    )
    if block is None:
        return []
    return _ARRAY_KEY.findall(block.group(1))


# ---------------------------------------------------------------------------
# Model relationships
# ---------------------------------------------------------------------------

_BELONGS_TO = re.compile(r"\bbelongsTo\(\s*([^)]+?)\s*\)")
_HAS_MANY = re.compile(r"\bhasMany\(\s*([^)]+?)\s*\)")
_MORPH_TO = re.compile(r"\bmorphTo\(")
_MORPH_MANY = re.compile(r"\bmorphMany\(\s*([^)]+?)\s*\)")


def extract_relationships(text: str) -> RelationshipSet:
    """Collect the argument text of relationship declarations.

    ``$this->belongsTo(Company::class)`` yields ``Company::class`` in
    ``belongs_to``. Each relationship kind is an independent pass.
    """
    return RelationshipSet(
        belongs_to=_BELONGS_TO.findall(text),
        has_many=_HAS_MANY.findall(text),
        morph_to=[MORPH_TO_SENTINEL for _ in _MORPH_TO.finditer(text)],
        morph_many=_MORPH_MANY.findall(text),
    )


# ---------------------------------------------------------------------------
# Trait usage
# ---------------------------------------------------------------------------


def mentions_trait(text: str, trait: str) -> bool:
    """True if the text contains ``use <trait>`` or ``use Has<trait>``."""
    return f"use {trait}" in text or f"use Has{trait}" in text
