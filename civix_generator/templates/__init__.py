"""Template rendering for generated artifacts.

The generator only talks to a ``Renderer``: something that turns a template
id plus a context mapping into text. Two implementations ship here:

    BuiltinRenderer   renders the templates in ``phpunit.py``
    OverrideRenderer  prefers Jinja2 files ``<templates_dir>/<template id>``
                      (``{{ testClass }}`` placeholders) and
                      falls back to another renderer

Example:
    renderer = OverrideRenderer(Path("templates"), BuiltinRenderer())
    text = renderer.render("test-e2e.php", {"testClass": "FooTest"})
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Protocol

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
)

from civix_generator.core.errors import RenderError

from .phpunit import (
    get_e2e_test_template,
    get_headless_test_template,
    get_legacy_test_template,
    get_phpunit_bootstrap_template,
    get_phpunit_xml_template,
)

TemplateFunc = Callable[[Mapping[str, object]], str]

PHPUNIT_XML_TEMPLATE = "phpunit.xml.dist"
PHPUNIT_BOOTSTRAP_TEMPLATE = "phpunit-boot-cv.php"

BUILTIN_TEMPLATES: dict[str, TemplateFunc] = {
    PHPUNIT_XML_TEMPLATE: get_phpunit_xml_template,
    PHPUNIT_BOOTSTRAP_TEMPLATE: get_phpunit_bootstrap_template,
    "test-headless.php": get_headless_test_template,
    "test-e2e.php": get_e2e_test_template,
    "test-legacy.php": get_legacy_test_template,
}


class Renderer(Protocol):
    """Anything that can render a template id against a context."""

    def render(self, template_id: str, ctx: Mapping[str, object]) -> str:
        """Return rendered text, or raise RenderError."""
        ...


class BuiltinRenderer:
    """Render the templates bundled with the generator."""

    def __init__(self, templates: Mapping[str, TemplateFunc] | None = None) -> None:
        self.templates = dict(BUILTIN_TEMPLATES if templates is None else templates)

    def render(self, template_id: str, ctx: Mapping[str, object]) -> str:
        template = self.templates.get(template_id)
        if template is None:
            raise RenderError(f"Unknown template: {template_id}")
        try:
            return template(ctx)
        except KeyError as exc:
            raise RenderError(
                f"Template {template_id} needs context key {exc.args[0]!r}"
            ) from exc


class OverrideRenderer:
    """Render Jinja2 files from a project templates directory.

    Files are looked up by template id (``templates/test-e2e.php``) and use
    ``{{ testClass }}`` style placeholders, so PHP ``$variables`` pass through
    untouched. Ids without a file are delegated to ``fallback``.
    """

    def __init__(self, templates_dir: Path, fallback: Renderer) -> None:
        self.templates_dir = templates_dir
        self.fallback = fallback
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )

    def render(self, template_id: str, ctx: Mapping[str, object]) -> str:
        try:
            template = self.env.get_template(template_id)
        except TemplateNotFound:
            return self.fallback.render(template_id, ctx)
        except TemplateError as exc:
            raise RenderError(f"Cannot load template {template_id}: {exc}") from exc

        try:
            return template.render(dict(ctx))
        except TemplateError as exc:
            raise RenderError(f"Cannot render template {template_id}: {exc}") from exc


def get_renderer(templates_dir: Path | None = None) -> Renderer:
    """Return the renderer for a project, honouring a template override dir."""
    builtin = BuiltinRenderer()
    if templates_dir is None:
        return builtin
    return OverrideRenderer(templates_dir, builtin)


__all__ = [
    "BUILTIN_TEMPLATES",
    "PHPUNIT_BOOTSTRAP_TEMPLATE",
    "PHPUNIT_XML_TEMPLATE",
    "BuiltinRenderer",
    "OverrideRenderer",
    "Renderer",
    "get_renderer",
]
