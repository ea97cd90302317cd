# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Build per-file obfuscation symbol rename maps."""

import logging
from dataclasses import dataclass

from obfuscation.catalog import (
    INTERNAL_NAMES,
    JAVA_KEYWORDS,
    STANDARD_CLASSES,
    STANDARD_METHODS,
)
from obfuscation.classifier import SourceIndex
from obfuscation.naming import NameGenerator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenameMap:
    """Store generated symbol rename mapping and collision hints.

    Args:
        mapping: Original symbol to obfuscated symbol mapping.
        shadowed_names: Generated names equal to another original identifier.
    """

    mapping: dict[str, str]
    shadowed_names: frozenset[str]


def rename_targets(index: SourceIndex) -> set[str]:
    """Subtract every exclusion from the classified candidates.

    Args:
        index: Source identifier index.

    Returns:
        Identifiers that will be renamed.
    """
    targets = set(index.candidates)
    targets.difference_update(JAVA_KEYWORDS)
    targets.difference_update(STANDARD_CLASSES)
    targets.difference_update(STANDARD_METHODS)
    targets.difference_update(index.derived_exclusions)
    targets.difference_update(INTERNAL_NAMES)
    return targets


def build_rename_map(
    index: SourceIndex, generator: NameGenerator | None = None
) -> RenameMap:
    """Build the rename map for one source file.

    Targets are visited in lexicographic order so a given file always maps
    the same way. One generator call is consumed per target.

    Args:
        index: Source identifier index.
        generator: Name generator owned by this file; a fresh one by default.

    Returns:
        Rename map for the file.
    """
    if generator is None:
        generator = NameGenerator()
    targets = rename_targets(index)

    mapping: dict[str, str] = {}
    for symbol in sorted(targets):
        mapping[symbol] = generator.next_name()

    known_names = targets | index.derived_exclusions
    shadowed_names = {
        new for old, new in mapping.items() if new != old and new in known_names
    }
    if shadowed_names:
        logger.warning(
            "Generated names coincide with original identifiers (names=%s)",
            ",".join(sorted(shadowed_names)),
        )

    return RenameMap(mapping=mapping, shadowed_names=frozenset(shadowed_names))
