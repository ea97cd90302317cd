# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for identifier classification rules."""

from obfuscation import classify_source
from obfuscation.classifier import (
    extract_declared_types,
    extract_field_names,
    extract_imported_names,
    extract_method_names,
    extract_package_names,
    extract_public_class_name,
    extract_typed_local_names,
    extract_variable_names,
)

SAMPLE = """
package com.example.tools;

import java.util.List;
import java.util.regex.Pattern;
import static java.lang.Math.max;

public class Inventory {
    private int itemCount;
    protected final String label;

    public Inventory(String name, int size) {
        label = name;
    }

    public static int totalOf(List values, int offset) {
        int sum = offset;
        Pattern matcherPattern = Pattern.compile("x");
        return sum;
    }
}

interface Shelf {}

enum Color { RED }
""".strip()


def test_ph2_cls_001_imports_yield_classes_and_lower_case_segments() -> None:
    names = extract_imported_names(SAMPLE)

    assert names == {
        "List",
        "Pattern",
        "Math",
        "java",
        "util",
        "regex",
        "static java",
        "lang",
        "max",
    }


def test_ph2_cls_002_package_components_are_collected() -> None:
    assert extract_package_names(SAMPLE) == {"com", "example", "tools"}


def test_ph2_cls_003_public_class_name_is_detected() -> None:
    assert extract_public_class_name(SAMPLE) == "Inventory"
    assert extract_public_class_name("class Hidden {}") is None


def test_ph2_cls_004_declared_types_cover_class_interface_enum() -> None:
    assert extract_declared_types(SAMPLE) == {"Inventory", "Shelf", "Color"}


def test_ph2_cls_005_method_rule_needs_modifier_or_preceding_word() -> None:
    assert extract_method_names(SAMPLE) == {"totalOf"}


def test_ph2_cls_006_field_rule_matches_modified_declarations() -> None:
    assert extract_field_names(SAMPLE) == {"itemCount", "label"}


def test_ph2_cls_007_variable_rules_collect_locals_and_parameters() -> None:
    names = extract_variable_names(SAMPLE)

    assert {"name", "size", "values", "offset", "sum", "matcherPattern"} <= names
    assert {"itemCount", "label", "Inventory", "Shelf", "Color"} <= names
    assert "RED" not in names


def test_ph2_cls_008_variable_rules_accept_array_and_qualified_types() -> None:
    names = extract_variable_names(
        "void fill(int[] data) {}\nvoid read(java.util.Map table) {}\n"
    )

    assert {"data", "table"} <= names


def test_ph2_cls_009_rule_filters_drop_keywords_and_library_types() -> None:
    assert extract_variable_names("else return;") == set()
    assert "String" not in extract_variable_names("final String;")


def test_ph2_cls_010_typed_locals_follow_known_library_types() -> None:
    source = "File input = null;\nScanner reader = null;\nFiles listing;\n"

    assert extract_typed_local_names(source) == {"input", "reader"}


def test_ph2_cls_011_classify_source_unions_rule_outputs() -> None:
    index = classify_source(SAMPLE)

    assert index.public_class_name == "Inventory"
    assert "totalOf" in index.candidates
    assert "itemCount" in index.candidates
    assert "matcherPattern" in index.typed_local_names
    assert {"com", "List", "java"} <= index.derived_exclusions


def test_ph2_cls_012_unparseable_text_yields_empty_index() -> None:
    index = classify_source("}}} ((( @@@")

    assert index.public_class_name is None
    assert index.candidates == frozenset()


def test_ph2_cls_013_import_components_split_on_dots_only() -> None:
    assert extract_imported_names("import static java.lang.Math.max;") == {
        "Math",
        "static java",
        "lang",
        "max",
    }
    assert extract_imported_names("// import user data; later\n") == {"user data"}
