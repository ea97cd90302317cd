# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Derive output paths for obfuscated files."""

from pathlib import Path

from obfuscation.mapper import RenameMap

OBFUSCATED_MARKER = "_obf"


def resolve_output_path(
    source_path: Path,
    public_class_name: str | None,
    rename_map: RenameMap,
    output_dir: Path | None = None,
) -> Path:
    """Choose where the obfuscated text of one file is written.

    A renamed public class names the file after its new name, in the current
    working directory. Otherwise the input name gets an ``_obf`` marker
    before the extension and stays next to the input. ``output_dir``
    replaces the directory in both cases.

    Args:
        source_path: Input file path.
        public_class_name: Public class declared in the file, if any.
        rename_map: Rename map built for the file.
        output_dir: Optional directory for every output.

    Returns:
        Output file path.
    """
    new_class = None
    if public_class_name is not None:
        new_class = rename_map.mapping.get(public_class_name)

    if new_class is None:
        file_name = f"{source_path.stem}{OBFUSCATED_MARKER}{source_path.suffix}"
        directory = source_path.parent
    else:
        file_name = f"{new_class}{source_path.suffix}"
        directory = Path()

    if output_dir is not None:
        directory = output_dir
    return directory / file_name


def is_obfuscated_output(path: Path) -> bool:
    """Check whether a path looks like an ``_obf`` output file."""
    return path.stem.endswith(OBFUSCATED_MARKER)
