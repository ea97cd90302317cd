# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Rewrite source text using obfuscation rename maps."""

import logging
import re
from dataclasses import dataclass

from obfuscation.mapper import RenameMap

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RewriteResult:
    """Store transformed source and rewrite counters.

    Args:
        transformed_source: Rewritten source text.
        symbols_renamed: Count of token replacements applied.
    """

    transformed_source: str
    symbols_renamed: int


def substitution_order(rename_map: RenameMap) -> list[tuple[str, str]]:
    """Order map entries by descending length of the original name.

    The sort is stable, so names of equal length keep map order.

    Args:
        rename_map: Generated rename map.

    Returns:
        ``(old, new)`` pairs in application order.
    """
    return sorted(rename_map.mapping.items(), key=lambda entry: -len(entry[0]))


def apply_rename_map(source: str, rename_map: RenameMap) -> RewriteResult:
    """Replace every whole-token occurrence of each mapped name.

    Replacements run one entry at a time over the whole text. A new name
    inserted by an earlier pass is matched again by a later pass when it
    equals a name still waiting in the queue (see ``RenameMap.shadowed_names``).

    Args:
        source: Original source text.
        rename_map: Generated rename map.

    Returns:
        Rewritten source and counters.
    """
    transformed = source
    symbols_renamed = 0
    for old, new in substitution_order(rename_map):
        # Unicode \w: accented letters belong to the surrounding token.
        pattern = re.compile(rf"(?<!\w){re.escape(old)}(?!\w)")
        transformed, count = pattern.subn(lambda _match: new, transformed)
        symbols_renamed += count
        logger.debug("Replaced symbol (old=%s new=%s count=%d)", old, new, count)
    return RewriteResult(
        transformed_source=transformed,
        symbols_renamed=symbols_renamed,
    )
