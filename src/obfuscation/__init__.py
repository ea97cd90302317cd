# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Public import surface for obfuscation components."""

from obfuscation.classifier import SourceIndex, classify_source
from obfuscation.mapper import RenameMap, build_rename_map
from obfuscation.naming import NameGenerator, alphabetic_name
from obfuscation.output import resolve_output_path
from obfuscation.pipeline import (
    FileProcessingError,
    FileResult,
    obfuscate_source,
    process_file,
)
from obfuscation.rewriter import RewriteResult, apply_rename_map

__all__ = [
    "FileProcessingError",
    "FileResult",
    "NameGenerator",
    "RenameMap",
    "RewriteResult",
    "SourceIndex",
    "alphabetic_name",
    "apply_rename_map",
    "build_rename_map",
    "classify_source",
    "obfuscate_source",
    "process_file",
    "resolve_output_path",
]
