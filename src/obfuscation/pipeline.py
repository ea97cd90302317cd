# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Run the per-file obfuscation pipeline."""

import logging
from dataclasses import dataclass
from pathlib import Path

from obfuscation.classifier import SourceIndex, classify_source
from obfuscation.mapper import RenameMap, build_rename_map
from obfuscation.output import resolve_output_path
from obfuscation.rewriter import RewriteResult, apply_rename_map

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ObfuscatedSource:
    """Represent the in-memory outcome for one source text."""

    index: SourceIndex
    rename_map: RenameMap
    rewrite: RewriteResult


@dataclass(frozen=True)
class FileResult:
    """Represent one successfully written file.

    Args:
        source_path: Input file path.
        output_path: Written output file path.
        symbols_discovered: Count of identifiers in the rename map.
        symbols_renamed: Count of token replacements applied.
    """

    source_path: Path
    output_path: Path
    symbols_discovered: int
    symbols_renamed: int


class FileProcessingError(RuntimeError):
    """Represent a read or write failure for one file."""


def obfuscate_source(source: str) -> ObfuscatedSource:
    """Classify, map and rewrite one source text.

    Args:
        source: Java source code.

    Returns:
        Index, rename map and rewrite result for the text.
    """
    index = classify_source(source)
    rename_map = build_rename_map(index=index)
    rewrite = apply_rename_map(source=source, rename_map=rename_map)
    return ObfuscatedSource(index=index, rename_map=rename_map, rewrite=rewrite)


def process_file(source_path: Path, output_dir: Path | None = None) -> FileResult:
    """Obfuscate one file and write the result next to it or into ``output_dir``.

    Args:
        source_path: Input file path.
        output_dir: Optional directory for the output file.

    Returns:
        Paths and counters of the written file.

    Raises:
        FileProcessingError: If the input cannot be read or the output written.
    """
    try:
        source = source_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Failed reading file (path=%s error=%s)", source_path, exc)
        raise FileProcessingError(str(exc)) from exc

    outcome = obfuscate_source(source)
    output_path = resolve_output_path(
        source_path=source_path,
        public_class_name=outcome.index.public_class_name,
        rename_map=outcome.rename_map,
        output_dir=output_dir,
    )
    if output_path.resolve() == source_path.resolve():
        logger.warning("Refusing to overwrite input (path=%s)", source_path)
        raise FileProcessingError(f"Output path would overwrite input: {output_path}")

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(outcome.rewrite.transformed_source, encoding="utf-8")
    except OSError as exc:
        logger.warning("Failed writing file (path=%s error=%s)", output_path, exc)
        raise FileProcessingError(str(exc)) from exc

    logger.debug(
        "Obfuscated file",
        extra={
            "path": str(source_path),
            "output": str(output_path),
            "symbols": len(outcome.rename_map.mapping),
        },
    )
    return FileResult(
        source_path=source_path,
        output_path=output_path,
        symbols_discovered=len(outcome.rename_map.mapping),
        symbols_renamed=outcome.rewrite.symbols_renamed,
    )
