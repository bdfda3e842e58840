"""Shared fixtures for the civix generator test suite.

Provides a ``make_extension`` factory that writes a minimal extension
(``info.xml`` plus optional ``civix.yaml``) into a temporary directory, and
an ``ext_dir`` fixture that also changes into it.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

MakeExtension = Callable[..., Path]

_INFO_XML = """<?xml version="1.0"?>
<extension key="{key}" type="{ext_type}">
  <file>{file}</file>
  <name>{name}</name>
  <civix>
    <namespace>{namespace}</namespace>
  </civix>
</extension>
"""


def write_info_xml(
    root: Path,
    ext_type: str = "module",
    key: str = "org.example.foo",
    file: str = "foo",
    name: str = "Foo",
    namespace: str = "CRM/Foo",
) -> Path:
    """Write an info.xml manifest into ``root`` and return its path."""
    path = root / "info.xml"
    path.write_text(
        _INFO_XML.format(
            key=key, ext_type=ext_type, file=file, name=name, namespace=namespace,
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture()
def make_extension(tmp_path: Path) -> MakeExtension:
    """Return a factory creating an extension directory under tmp_path.

    Usage::

        root = make_extension()                      # module extension
        root = make_extension(ext_type="report")
        root = make_extension(settings="test_template: e2e\\n")
    """

    def _make(
        ext_type: str = "module",
        settings: str | None = None,
        name: str = "org.example.foo",
    ) -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        write_info_xml(root, ext_type=ext_type, key=name)
        if settings is not None:
            (root / "civix.yaml").write_text(settings, encoding="utf-8")
        return root

    return _make


@pytest.fixture()
def ext_dir(make_extension: MakeExtension) -> Iterator[Path]:
    """Create a module extension and cd into it for the duration of a test."""
    root = make_extension()
    original_cwd = Path.cwd()
    os.chdir(root)
    try:
        yield root
    finally:
        os.chdir(original_cwd)


@pytest.fixture(autouse=True)
def _no_color(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep console output free of ANSI codes for assertions."""
    monkeypatch.setenv("NO_COLOR", "1")
