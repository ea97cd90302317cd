# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for obfuscation rename map generation."""

import logging

import pytest

from obfuscation import NameGenerator, SourceIndex, build_rename_map, classify_source
from obfuscation.catalog import (
    INTERNAL_NAMES,
    JAVA_KEYWORDS,
    STANDARD_CLASSES,
    STANDARD_METHODS,
)


def _index(**sets: frozenset[str]) -> SourceIndex:
    fields = {
        "declared_types": frozenset(),
        "method_names": frozenset(),
        "field_names": frozenset(),
        "variable_names": frozenset(),
        "imported_names": frozenset(),
        "package_names": frozenset(),
        "typed_local_names": frozenset(),
    }
    fields.update(sets)
    return SourceIndex(public_class_name=None, **fields)


def test_ph3_map_101_mapper_assigns_names_in_sorted_order() -> None:
    index = _index(
        declared_types=frozenset({"Alpha"}),
        variable_names=frozenset({"gamma", "beta"}),
        field_names=frozenset({"beta"}),
    )

    first = build_rename_map(index=index)
    second = build_rename_map(index=index)

    assert first.mapping == {"Alpha": "a", "beta": "b", "gamma": "c"}
    assert first.mapping == second.mapping


def test_ph3_map_102_mapper_excludes_every_catalog() -> None:
    excluded = {"while", "String", "println", "counter", "java", "com", "reader"}
    index = _index(
        variable_names=frozenset(excluded | {"keep"}),
        imported_names=frozenset({"java"}),
        package_names=frozenset({"com"}),
        typed_local_names=frozenset({"reader"}),
    )

    rename_map = build_rename_map(index=index)

    assert set(rename_map.mapping) == {"keep"}


def test_ph3_map_103_mapper_never_maps_catalog_names() -> None:
    catalogs = JAVA_KEYWORDS | STANDARD_CLASSES | STANDARD_METHODS | INTERNAL_NAMES
    index = _index(variable_names=frozenset(catalogs | {"x1", "x2"}))

    rename_map = build_rename_map(index=index)

    assert set(rename_map.mapping) == {"x1", "x2"}


def test_ph3_map_104_mapping_is_injective() -> None:
    names = frozenset(f"value{number}" for number in range(100))
    index = _index(variable_names=names)

    rename_map = build_rename_map(index=index)

    assert len(set(rename_map.mapping.values())) == len(rename_map.mapping) == 100


def test_ph3_map_105_mapper_uses_supplied_generator() -> None:
    generator = NameGenerator()
    generator.next_name()
    index = _index(variable_names=frozenset({"only"}))

    rename_map = build_rename_map(index=index, generator=generator)

    assert rename_map.mapping == {"only": "b"}
    assert generator.counter == 2


def test_ph3_map_106_mapper_flags_generated_names_matching_originals() -> None:
    index = _index(variable_names=frozenset({"b", "zeta"}))

    rename_map = build_rename_map(index=index)

    assert rename_map.mapping == {"b": "a", "zeta": "b"}
    assert rename_map.shadowed_names == frozenset({"b"})


def test_ph3_map_107_mapper_on_classified_source() -> None:
    source = (
        "package app;\n"
        "import java.io.File;\n"
        "public class Report {\n"
        "    private int total;\n"
        "    public void run() {\n"
        "        File target = null;\n"
        "        int count = total;\n"
        "    }\n"
        "}\n"
    )

    rename_map = build_rename_map(index=classify_source(source))

    assert rename_map.mapping == {"Report": "a", "count": "b", "total": "c"}
    assert rename_map.shadowed_names == frozenset()


def test_ph3_map_108_shadowed_names_are_logged_in_message(
    caplog: pytest.LogCaptureFixture,
) -> None:
    index = _index(variable_names=frozenset({"b", "c", "zeta", "omega"}))

    with caplog.at_level(logging.WARNING, logger="obfuscation.mapper"):
        build_rename_map(index=index)

    assert "(names=b,c)" in caplog.text
