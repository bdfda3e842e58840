"""Tests for class name validation and test file path resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from civix_generator.core.class_names import (
    ResolvedTestPath,
    resolve_test_path,
    split_class_name,
    validate_class_name,
)
from civix_generator.core.errors import GenerationError, InvalidIdentifierError


class TestValidateClassName:
    """Lexical and suffix rules for user supplied class names."""

    @pytest.mark.parametrize(
        "name",
        [
            "CRM_Foo_BarTest",
            "Civi\\Foo\\BarTest",
            "FooTest",
            "Test",
            "CRM_Foo2_Bar_9Test",
        ],
    )
    def test_accepts_valid_names(self, name: str) -> None:
        assert validate_class_name(name) == name

    def test_trims_leading_and_trailing_separators(self) -> None:
        assert validate_class_name("\\Civi\\Foo\\BarTest\\") == "Civi\\Foo\\BarTest"

    @pytest.mark.parametrize(
        "name",
        [
            "CRM-Foo-BarTest",
            "Civi/Foo/BarTest",
            "CRM_Foo BarTest",
            "CRM.Foo.BarTest",
            "CRM_FööTest",
            "",
            "\\\\",
        ],
    )
    def test_rejects_characters_outside_identifier_set(self, name: str) -> None:
        with pytest.raises(InvalidIdentifierError, match="alphanumeric"):
            validate_class_name(name)

    @pytest.mark.parametrize(
        "name",
        ["FooBar", "CRM_Foo_BarTests", "CRM_Foo_Bartest", "Civi\\Foo\\TestBar"],
    )
    def test_rejects_names_without_test_suffix(self, name: str) -> None:
        with pytest.raises(InvalidIdentifierError, match='end with the word "Test"'):
            validate_class_name(name)

    def test_error_names_the_offending_input(self) -> None:
        with pytest.raises(InvalidIdentifierError) as exc_info:
            validate_class_name("FooBar")
        assert "'FooBar'" in exc_info.value.message
        assert isinstance(exc_info.value, GenerationError)


class TestSplitClassName:
    def test_namespaced_name(self) -> None:
        assert split_class_name("Civi\\Foo\\BarTest") == ("Civi\\Foo", "BarTest")

    def test_underscore_name_has_no_namespace(self) -> None:
        assert split_class_name("CRM_Foo_BarTest") == ("", "CRM_Foo_BarTest")


class TestResolveTestPath:
    """Mapping of class names to files below tests/phpunit."""

    def test_underscore_name_maps_to_nested_directories(self, tmp_path: Path) -> None:
        resolved = resolve_test_path("CRM_Foo_BarTest", tmp_path)

        assert resolved == ResolvedTestPath(
            tmp_path / "tests" / "phpunit" / "CRM" / "Foo" / "BarTest.php",
            "",
            "CRM_Foo_BarTest",
        )

    def test_namespaced_name_maps_to_nested_directories(self, tmp_path: Path) -> None:
        resolved = resolve_test_path("Civi\\Foo\\BarTest", tmp_path)

        assert resolved.file_path == (
            tmp_path / "tests" / "phpunit" / "Civi" / "Foo" / "BarTest.php"
        )
        assert resolved.namespace == "Civi\\Foo"
        assert resolved.symbol == "BarTest"

    def test_mixed_separators(self, tmp_path: Path) -> None:
        resolved = resolve_test_path("Civi\\Foo_Api\\BarTest", tmp_path)

        assert resolved.file_path == (
            tmp_path / "tests" / "phpunit" / "Civi" / "Foo" / "Api" / "BarTest.php"
        )
        assert resolved.namespace == "Civi\\Foo_Api"

    def test_is_deterministic(self, tmp_path: Path) -> None:
        first = resolve_test_path("Civi\\Foo\\BarTest", tmp_path)
        second = resolve_test_path("Civi\\Foo\\BarTest", tmp_path)
        assert first == second

    def test_does_not_touch_filesystem(self, tmp_path: Path) -> None:
        resolve_test_path("CRM_Foo_BarTest", tmp_path)
        assert list(tmp_path.iterdir()) == []
