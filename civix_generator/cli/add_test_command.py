#!/usr/bin/env python3
"""
Add a new PHPUnit test to a CiviCRM module extension.

Creates phpunit.xml.dist and tests/phpunit/bootstrap.php when they are
missing, then writes the test class itself. Existing files are never
overwritten.

Usage:
    civix generate:test CRM_Myextension_MyTest
    civix generate:test 'Civi\\Myextension\\MyTest' --template e2e
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path

# When executed directly, ensure the project root is on sys.path
if __package__ in (None, ""):
    project_root = Path(__file__).resolve().parents[2]
    sys.path.insert(0, str(project_root))

from civix_generator.core.errors import GenerationError, UnknownTemplateError
from civix_generator.core.generate_test import generate_test
from civix_generator.core.report import GenerationReport, Severity
from civix_generator.core.test_templates import CLI_TEST_TEMPLATES
from civix_generator.helpers.ext_dir import find_ext_dir
from civix_generator.helpers.helpers_logging import (
    print_error,
    print_success,
    print_warning,
)
from civix_generator.helpers.info_xml import load_info
from civix_generator.helpers.settings import load_settings
from civix_generator.templates import get_renderer

_SEVERITY_PRINTERS: dict[Severity, Callable[[str], None]] = {
    Severity.INFO: print_success,
    Severity.COMMENT: print_warning,
    Severity.ERROR: print_error,
}

_TEMPLATE_HELP = """
In creating a test, you may specify a template:
  headless: A headless test boots CiviCRM once with a headless database, and
            all work can be executed in-process. These are faster and support
            automatic cleanup, but they provide a less thorough simulation
            of real-world systems.
  e2e:      An end-to-end test boots the live installation of CiviCRM and
            the real CMS. This provides a more thorough simulation, and you
            may spawn requests to Civi using HTTP or cv(). However, spawning
            separate requests will be slower, and data-cleanup may take more
            effort.
  legacy:   A variation of `headless` based on CiviUnitTestCase.
            It is provided primarily for testing purposes.

To execute tests, call phpunit directly, e.g.

  phpunit tests/phpunit/CRM/Myextension/MyTest.php

Note: The design of headless and E2E tests prevent them from running
concurrently. If you have a mix of tests, you can execute them
as separate groups:

  phpunit --group headless
  phpunit --group e2e

Defaults can be set in civix.yaml at the extension root:

  test_template: e2e
  templates_dir: templates

A file in templates_dir named after a template (test-headless.php,
test-e2e.php, test-legacy.php, phpunit.xml.dist, phpunit-boot-cv.php)
replaces the built-in one. Overrides are Jinja2 templates, e.g.

  class {{ testClass }} extends \\PHPUnit\\Framework\\TestCase {
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="civix generate:test",
        description="Add a new PHPUnit test to a CiviCRM Module-Extension",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_TEMPLATE_HELP,
    )
    parser.add_argument(
        "class_name",
        metavar="<CRM_Full_ClassName>",
        help='The full class name (eg "CRM_Myextension_MyTest" '
        + 'or "Civi\\Myextension\\MyTest")',
    )
    # Checked in main() so unknown values are reported like other generation errors
    parser.add_argument(
        "--template",
        default=None,
        help="The template of test to generate "
        + f"({', '.join(CLI_TEST_TEMPLATES)}). Default: headless",
    )
    return parser


def print_report(report: GenerationReport) -> None:
    """Print one console line per report entry, tagged by severity."""
    for line in report:
        _SEVERITY_PRINTERS[line.severity](line.message)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for generate:test command."""
    args = build_parser().parse_args(argv)

    basedir = find_ext_dir()
    report = GenerationReport()
    try:
        settings = load_settings(basedir)
        template = args.template or settings.test_template
        if template not in CLI_TEST_TEMPLATES:
            raise UnknownTemplateError(template, CLI_TEST_TEMPLATES)
        ctx = load_info(basedir)
        generate_test(
            args.class_name,
            template,
            basedir,
            ctx,
            renderer=get_renderer(settings.templates_dir),
            report=report,
        )
    except GenerationError as exc:
        print_report(report)
        exc.print_error()
        return 1

    print_report(report)
    return 1 if report.has_errors else 0


if __name__ == "__main__":
    sys.exit(main())
