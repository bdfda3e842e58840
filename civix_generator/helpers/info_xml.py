"""Read the extension manifest (info.xml).

Only the fields the generators need are extracted::

    <extension key="org.example.myext" type="module">
      <file>myext</file>
      <name>My Extension</name>
      <civix>
        <namespace>CRM/Myext</namespace>
      </civix>
    </extension>
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from civix_generator.core.errors import ManifestError


class Info:
    """Parsed info.xml of one extension."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.root: ET.Element | None = None

    def load(self) -> Info:
        self.root = self._parse()
        return self

    def _parse(self) -> ET.Element:
        if not self.path.is_file():
            raise ManifestError(f"Extension manifest not found: {self.path}")
        try:
            root = ET.parse(self.path).getroot()
        except ET.ParseError as exc:
            raise ManifestError(f"Cannot parse {self.path}: {exc}") from exc
        if root.tag != "extension":
            raise ManifestError(
                f"{self.path}: expected <extension> root element, got <{root.tag}>"
            )
        return root

    def _require_root(self) -> ET.Element:
        if self.root is None:
            self.root = self._parse()
        return self.root

    def get_type(self) -> str:
        return self._require_root().get("type", "")

    def get_key(self) -> str:
        return self._require_root().get("key", "")

    def _text(self, xpath: str) -> str:
        node = self._require_root().find(xpath)
        if node is None or node.text is None:
            return ""
        return node.text.strip()

    def to_context(self) -> dict[str, object]:
        """Return the manifest fields as generation context entries."""
        ctx: dict[str, object] = {
            "type": self.get_type(),
            "fullName": self.get_key(),
            "mainFile": self._text("file"),
            "name": self._text("name"),
        }
        namespace = self._text("civix/namespace")
        if namespace:
            ctx["namespace"] = namespace
        return ctx


def load_info(basedir: Path) -> dict[str, object]:
    """Load ``basedir/info.xml`` into a context mapping (with ``basedir``)."""
    ctx = Info(basedir / "info.xml").load().to_context()
    ctx["basedir"] = str(basedir)
    return ctx
