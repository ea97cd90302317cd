# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Classify identifiers in Java source text with independent pattern rules.

Every rule scans the full, unmodified text on its own and returns a set of
names; rules share no scanning state. Matching is purely lexical, so rules
can miss declarations or pick up unrelated tokens. Both outcomes are
tolerated: a miss leaves a name untouched and a stray match is filtered by
the exclusion catalogs or renamed consistently everywhere.
"""

import logging
import re
from dataclasses import dataclass

from obfuscation.catalog import (
    FIELD_MODIFIERS,
    JAVA_KEYWORDS,
    METHOD_MODIFIERS,
    STANDARD_CLASSES,
    TYPED_LOCAL_MARKERS,
)

logger = logging.getLogger(__name__)

# Java's \w and \b are ASCII-only by default.
_FLAGS = re.ASCII

_IMPORTED_CLASS_PATTERN = re.compile(r"\bimport\s+[^;]*\.([A-Z]\w*);?", _FLAGS)
_IMPORT_PATH_PATTERN = re.compile(r"\bimport\s+([^;]+);", _FLAGS)
_PACKAGE_PATTERN = re.compile(r"\bpackage\s+([^;]+);", _FLAGS)
_PUBLIC_CLASS_PATTERN = re.compile(r"\bpublic\s+class\s+(\w+)", _FLAGS)
_DECLARED_TYPE_PATTERN = re.compile(r"\b(?:class|interface|enum)\s+(\w+)", _FLAGS)
_METHOD_PATTERN = re.compile(
    rf"\b(?:{'|'.join(METHOD_MODIFIERS)})*\s+\w+\s+(\w+)\s*\(", _FLAGS
)
_FIELD_PATTERN = re.compile(
    rf"\b(?:{'|'.join(FIELD_MODIFIERS)})*\s+\w+\s+(\w+)\s*;", _FLAGS
)
_TYPE_TOKEN = r"(?:\w+|\w+\[\s*\w*\s*\]|\w+\.\w+)"
_PARAMETER_PATTERN = re.compile(
    rf"\b(?:{'|'.join(METHOD_MODIFIERS)}|\w+)\s+{_TYPE_TOKEN}\s+(\w+)\s*(?=[,)])",
    _FLAGS,
)
_LOCAL_PATTERN = re.compile(
    rf"\b{_TYPE_TOKEN}\s+(\w+)\s*(?==|;|,|\)|\{{|\}})", _FLAGS
)
_TYPED_LOCAL_PATTERN = re.compile(
    rf"\b(?:{'|'.join(TYPED_LOCAL_MARKERS)})\s+(\w+)", _FLAGS
)


@dataclass(frozen=True)
class SourceIndex:
    """Represent identifiers discovered in one source file.

    Args:
        public_class_name: Name following ``public class``, if any.
        declared_types: Class, interface and enum names.
        method_names: Names taken from method declarations.
        field_names: Names taken from field declarations.
        variable_names: Parameter and local variable names.
        imported_names: Names derived from import statements.
        package_names: Components of the package declaration.
        typed_local_names: Variables declared with a known library type.
    """

    public_class_name: str | None
    declared_types: frozenset[str]
    method_names: frozenset[str]
    field_names: frozenset[str]
    variable_names: frozenset[str]
    imported_names: frozenset[str]
    package_names: frozenset[str]
    typed_local_names: frozenset[str]

    @property
    def candidates(self) -> frozenset[str]:
        """Union of every renameable rule output."""
        return (
            self.declared_types
            | self.method_names
            | self.field_names
            | self.variable_names
        )

    @property
    def derived_exclusions(self) -> frozenset[str]:
        """Union of the exclusions derived from this file."""
        return self.imported_names | self.package_names | self.typed_local_names


def classify_source(source: str) -> SourceIndex:
    """Run every extraction rule over one source text.

    Args:
        source: Java source code.

    Returns:
        Identifier index for rename planning.
    """
    index = SourceIndex(
        public_class_name=extract_public_class_name(source),
        declared_types=frozenset(extract_declared_types(source)),
        method_names=frozenset(extract_method_names(source)),
        field_names=frozenset(extract_field_names(source)),
        variable_names=frozenset(extract_variable_names(source)),
        imported_names=frozenset(extract_imported_names(source)),
        package_names=frozenset(extract_package_names(source)),
        typed_local_names=frozenset(extract_typed_local_names(source)),
    )
    logger.debug(
        "Classified source (public_class=%s candidates=%d exclusions=%d)",
        index.public_class_name,
        len(index.candidates),
        len(index.derived_exclusions),
    )
    return index


def extract_imported_names(source: str) -> set[str]:
    """Collect imported class names and lower-case import path components.

    ``import java.util.List;`` yields ``List``, ``java`` and ``util``.
    Only dots separate components, so a static import keeps its keyword on
    the first one (``static java``) and that component matches nothing.

    Args:
        source: Java source code.

    Returns:
        Names that must not be renamed.
    """
    names = {match.group(1) for match in _IMPORTED_CLASS_PATTERN.finditer(source)}
    for match in _IMPORT_PATH_PATTERN.finditer(source):
        for part in match.group(1).split("."):
            part = part.strip()
            if part and part[0].islower():
                names.add(part)
    return names


def extract_package_names(source: str) -> set[str]:
    """Collect every component of the package declaration.

    Args:
        source: Java source code.

    Returns:
        Package path components.
    """
    names: set[str] = set()
    for match in _PACKAGE_PATTERN.finditer(source):
        for part in match.group(1).split("."):
            part = part.strip()
            if part:
                names.add(part)
    return names


def extract_public_class_name(source: str) -> str | None:
    """Return the first ``public class`` name, or ``None``."""
    match = _PUBLIC_CLASS_PATTERN.search(source)
    return match.group(1) if match else None


def extract_declared_types(source: str) -> set[str]:
    """Collect names following ``class``, ``interface`` and ``enum``."""
    return {match.group(1) for match in _DECLARED_TYPE_PATTERN.finditer(source)}


def extract_method_names(source: str) -> set[str]:
    """Collect method names from declarations such as ``static int f(``.

    Args:
        source: Java source code.

    Returns:
        Method names that are neither keywords nor library types.
    """
    return _filtered_matches(_METHOD_PATTERN, source)


def extract_field_names(source: str) -> set[str]:
    """Collect field names from declarations such as ``private int n;``.

    Args:
        source: Java source code.

    Returns:
        Field names that are neither keywords nor library types.
    """
    return _filtered_matches(_FIELD_PATTERN, source)


def extract_variable_names(source: str) -> set[str]:
    """Collect parameter and local variable names.

    The local-variable rule matches any ``Type name`` pair followed by
    ``=``, ``;``, ``,``, ``)``, ``{`` or ``}`` and therefore also
    re-discovers parameters, fields and some type names.

    Args:
        source: Java source code.

    Returns:
        Variable names that are neither keywords nor library types.
    """
    names = _filtered_matches(_PARAMETER_PATTERN, source)
    names.update(_filtered_matches(_LOCAL_PATTERN, source))
    return names


def extract_typed_local_names(source: str) -> set[str]:
    """Collect names declared with a known I/O or utility type.

    Two such variables with different library types would otherwise be able
    to receive clashing names, so they are left alone.

    Args:
        source: Java source code.

    Returns:
        Names to exclude from renaming.
    """
    return {match.group(1) for match in _TYPED_LOCAL_PATTERN.finditer(source)}


def _filtered_matches(pattern: re.Pattern[str], source: str) -> set[str]:
    names: set[str] = set()
    for match in pattern.finditer(source):
        name = match.group(1)
        if name in JAVA_KEYWORDS or name in STANDARD_CLASSES:
            continue
        names.add(name)
    return names
