"""Optional per-extension settings from ``civix.yaml``.

Recognised keys::

    test_template: e2e         # default for --template
    templates_dir: templates   # template override directory, relative to the extension

Anything else in the file is ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import cast

import yaml

from civix_generator.core.errors import SettingsError
from civix_generator.core.test_templates import DEFAULT_TEST_TEMPLATE

SETTINGS_FILE = "civix.yaml"


@dataclass(frozen=True)
class Settings:
    test_template: str = DEFAULT_TEST_TEMPLATE
    templates_dir: Path | None = None


def _get_str(data: dict[str, object], key: str, path: Path) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value:
        raise SettingsError(f"{path}: '{key}' must be a non-empty string")
    return value


def load_settings(basedir: Path) -> Settings:
    """Load ``civix.yaml`` from the extension root, or return defaults."""
    path = basedir / SETTINGS_FILE
    if not path.exists():
        return Settings()

    try:
        raw_data: object = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise SettingsError(f"Cannot parse {path}: {exc}") from exc

    if raw_data is None:
        return Settings()
    if not isinstance(raw_data, dict):
        raise SettingsError(f"{path}: expected a mapping at the top level")

    data = cast(dict[str, object], raw_data)
    test_template = _get_str(data, "test_template", path) or DEFAULT_TEST_TEMPLATE
    templates_dir = _get_str(data, "templates_dir", path)

    templates_path = basedir / templates_dir if templates_dir else None
    if templates_path is not None and not templates_path.is_dir():
        raise SettingsError(
            f"{path}: templates_dir '{templates_dir}' is not a directory"
        )

    return Settings(test_template=test_template, templates_dir=templates_path)
