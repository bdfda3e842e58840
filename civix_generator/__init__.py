"""
civix generator

Scaffolding for CiviCRM extensions: generates PHPUnit configuration,
bootstrap and test classes without overwriting existing files.
"""

__version__ = "0.1.0"

from civix_generator.core.generate_test import generate_test
from civix_generator.cli.commands import CLI

__all__ = [
    "generate_test",
    "CLI",
]
