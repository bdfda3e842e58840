"""Validation of test class names and their mapping to files.

Class names come in two flavours, both accepted:

- PEAR-style: ``CRM_Myextension_MyTest``
- namespaced: ``Civi\\Myextension\\MyTest``

Both map to a file under ``tests/phpunit`` by turning every ``_`` and
``\\`` into a directory separator, e.g. ``CRM_Foo_BarTest`` becomes
``tests/phpunit/CRM/Foo/BarTest.php``.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import NamedTuple

from .errors import InvalidIdentifierError

NAMESPACE_SEPARATOR = "\\"
LEGACY_SEPARATOR = "_"
TEST_SUFFIX = "Test"
TEST_FILE_EXTENSION = ".php"
TEST_ROOT_PARTS = ("tests", "phpunit")

_CLASS_NAME_PATTERN = re.compile(r"[A-Za-z0-9_\\]+")


class ResolvedTestPath(NamedTuple):
    """Physical location and namespace split of a test class."""

    file_path: Path
    namespace: str
    symbol: str


def validate_class_name(name: str) -> str:
    """Return the trimmed class name, or raise InvalidIdentifierError.

    Args:
        name: Fully-qualified class name as typed by the user

    Returns:
        The name without leading/trailing namespace separators
    """
    trimmed = name.strip(NAMESPACE_SEPARATOR)

    if not _CLASS_NAME_PATTERN.fullmatch(trimmed):
        raise InvalidIdentifierError(
            "Class name must be alphanumeric "
            + f"(with underscores and backslashes): '{name}'"
        )
    if not trimmed.endswith(TEST_SUFFIX):
        raise InvalidIdentifierError(
            f"Class name must end with the word \"{TEST_SUFFIX}\": '{name}'"
        )
    return trimmed


def split_class_name(name: str) -> tuple[str, str]:
    """Split a class name into (namespace, symbol) on the namespace separator."""
    namespace, _sep, symbol = name.rpartition(NAMESPACE_SEPARATOR)
    return namespace, symbol


def resolve_test_path(name: str, root: Path) -> ResolvedTestPath:
    """Map a validated class name to its file below ``root/tests/phpunit``."""
    namespace, symbol = split_class_name(name)
    relative = name.replace(NAMESPACE_SEPARATOR, "/").replace(LEGACY_SEPARATOR, "/")
    file_path = root.joinpath(*TEST_ROOT_PARTS, *relative.split("/"))
    file_path = file_path.with_name(file_path.name + TEST_FILE_EXTENSION)
    return ResolvedTestPath(file_path, namespace, symbol)
