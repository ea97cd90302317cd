# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Obfuscate Java source files given on the command line."""

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

import pathspec
from obfuscation import FileProcessingError, process_file
from obfuscation.output import is_obfuscated_output
from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger(__name__)

PROG = "java-obfuscate"
USAGE = f"Usage: {PROG} <file1.java> [file2.java...]"
DEFAULT_EXTENSION = ".java"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class RunOptions:
    """Represent parsed command options.

    Args:
        paths: Input files or directories, in command-line order.
        output_dir: Directory receiving every output file, if set.
        extension: Source suffix used when expanding directories.
        log_level: Root logging threshold name.
    """

    paths: tuple[Path, ...]
    output_dir: Path | None
    extension: str
    log_level: str


class IgnoreMatcher:
    """Skip files excluded by any .gitignore below an input directory.

    Each .gitignore applies only to paths beneath its own directory, and a
    nested file cannot re-include what a parent file excludes.
    """

    def __init__(
        self, scoped_specs: list[tuple[Path, pathspec.GitIgnoreSpec]]
    ) -> None:
        """Initialize matcher.

        Args:
            scoped_specs: Directory relative to the input root, with its rules.
        """
        self._scoped_specs = scoped_specs

    @classmethod
    def from_directory(cls, input_root: Path) -> "IgnoreMatcher":
        """Compile every .gitignore found below an input directory.

        Args:
            input_root: Directory given on the command line.

        Returns:
            Configured ignore matcher.

        Raises:
            OSError: If .gitignore files cannot be read.
            UnicodeDecodeError: If .gitignore files contain invalid UTF-8.
        """
        scoped_specs: list[tuple[Path, pathspec.GitIgnoreSpec]] = []
        for ignore_path in sorted(input_root.rglob(".gitignore")):
            scope = ignore_path.parent.relative_to(input_root)
            lines = ignore_path.read_text(encoding="utf-8").splitlines()
            scoped_specs.append((scope, pathspec.GitIgnoreSpec.from_lines(lines)))
        return cls(scoped_specs=scoped_specs)

    def matches(self, relative_path: Path) -> bool:
        """Check whether a file should be skipped.

        Args:
            relative_path: File path relative to the input directory.

        Returns:
            True when any scoped .gitignore excludes the file.
        """
        for scope, spec in self._scoped_specs:
            if scope not in relative_path.parents:
                continue
            if spec.match_file(relative_path.relative_to(scope).as_posix()):
                return True
        return False


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging with Rich handler.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(prog=PROG)
    parser.add_argument(
        "paths", nargs="*", help="Java source files or directories to obfuscate."
    )
    parser.add_argument(
        "--output-dir",
        required=False,
        help="Directory for every output file instead of the default placement.",
    )
    parser.add_argument(
        "--extension",
        default=DEFAULT_EXTENSION,
        help="Source file suffix collected from directory inputs.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="INFO",
        help="Logging threshold.",
    )
    return parser


def run(argv: list[str], stdout: TextIO, stderr: TextIO) -> int:
    """Run obfuscation command.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit:
        logger.warning("Argument parsing failed (argv=%s)", argv)
        return 2

    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    if not args.paths:
        _print_line(console=console, text=USAGE)
        return 0

    options = RunOptions(
        paths=tuple(Path(path) for path in args.paths),
        output_dir=Path(args.output_dir) if args.output_dir else None,
        extension=_normalize_extension(args.extension),
        log_level=args.log_level,
    )
    logging.getLogger().setLevel(options.log_level)

    processed = 0
    failed = 0
    written: dict[Path, Path] = {}
    for source_path in _expand_inputs(options=options, stderr=stderr):
        try:
            result = process_file(
                source_path=source_path, output_dir=options.output_dir
            )
        except FileProcessingError as exc:
            stderr.write(f"Fail: {source_path}: {exc}\n")
            failed += 1
            continue
        resolved_output = result.output_path.resolve()
        previous = written.get(resolved_output)
        if previous is not None:
            logger.warning(
                "Output overwritten within batch (output=%s previous=%s current=%s)",
                result.output_path,
                previous,
                source_path,
            )
        written[resolved_output] = source_path
        _print_line(
            console=console,
            text=f"Success: {source_path} -> {result.output_path}",
        )
        processed += 1

    logger.info("Obfuscation finished (processed=%d failed=%d)", processed, failed)
    return 0


def _print_line(console: Console, text: str) -> None:
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def _normalize_extension(extension: str) -> str:
    if extension.startswith("."):
        return extension
    return f".{extension}"


def _expand_inputs(options: RunOptions, stderr: TextIO) -> list[Path]:
    """Replace directory inputs with the source files below them.

    Plain paths pass through untouched, including missing ones, so that they
    are reported by the per-file step.

    Args:
        options: Parsed command options.
        stderr: Standard error stream.

    Returns:
        Files to process, in order.
    """
    expanded: list[Path] = []
    for path in options.paths:
        if not path.is_dir():
            expanded.append(path)
            continue
        try:
            discovered = _discover_sources(root=path, extension=options.extension)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Failed scanning directory (path=%s error=%s)", path, exc)
            stderr.write(f"Fail: {path}: {exc}\n")
            continue
        if not discovered:
            logger.info(
                "No source files found (path=%s extension=%s)",
                path,
                options.extension,
            )
        expanded.extend(discovered)
    return expanded


def _discover_sources(root: Path, extension: str) -> list[Path]:
    """Collect source files below a directory.

    Args:
        root: Directory given on the command line.
        extension: Source file suffix.

    Returns:
        Sorted source files not excluded by .gitignore.

    Raises:
        OSError: If the directory or its .gitignore files cannot be read.
        UnicodeDecodeError: If .gitignore files contain invalid UTF-8.
    """
    matcher = IgnoreMatcher.from_directory(input_root=root)
    sources: list[Path] = []
    for candidate in sorted(root.rglob(f"*{extension}")):
        if not candidate.is_file():
            continue
        relative = candidate.relative_to(root)
        if ".git" in relative.parts:
            continue
        if is_obfuscated_output(candidate):
            continue
        if matcher.matches(relative_path=relative):
            continue
        sources.append(candidate)
    return sources


def main() -> None:
    """Run obfuscation CLI."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
