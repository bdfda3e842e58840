#!/usr/bin/env python3
"""civix generator CLI - Main Entry Point.

Usage:
    civix <command> [options]

Commands:
    generate:test        Add a new PHPUnit test to a CiviCRM Module-Extension
    help                 Show this help message
"""

from __future__ import annotations

import sys

import click

from civix_generator.helpers.ext_dir import find_ext_dir

# Minimum number of CLI args (program name + command)
_MIN_ARGS = 2

# Commands dispatched to their own argparse handler
GENERATOR_COMMANDS: dict[str, dict[str, str]] = {
    "generate:test": {
        "module": "civix_generator.cli.add_test_command",
        "description": "Add a new PHPUnit test to a CiviCRM Module-Extension",
    },
}


def print_help() -> None:
    """Print help message with all available commands."""
    print(__doc__)
    print(f"📍 Extension: {find_ext_dir()}")

    print("\n📦 Generator commands:")
    for cmd, info in GENERATOR_COMMANDS.items():
        print(f"  {cmd:20} - {info['description']}")


def execute_command(command: str, extra_args: list[str]) -> int:
    """Run a generator command with the remaining command-line arguments."""
    if command == "generate:test":
        from civix_generator.cli.add_test_command import main as add_test_main

        return add_test_main(extra_args)

    print(f"❌ Unknown command: {command}")
    print("\nRun 'civix help' to see available commands.")
    return 1


@click.group(invoke_without_command=True)
@click.pass_context
def _click_cli(ctx: click.Context) -> int:
    """Top-level civix command group with passthrough command registration."""
    if ctx.invoked_subcommand is not None:
        return 0

    print_help()
    return 0


def _register_passthrough_command(
    command_name: str,
    description: str,
) -> None:
    """Register a click command whose arguments are parsed by argparse."""

    @click.command(
        name=command_name,
        help=description,
        context_settings={
            "allow_extra_args": True,
            "ignore_unknown_options": True,
        },
        add_help_option=False,
    )
    @click.pass_context
    def _cmd(ctx: click.Context) -> int:
        extra_args: list[str] = list(ctx.args)
        return execute_command(command_name, extra_args)

    _click_cli.add_command(_cmd)


def _register_commands() -> None:
    """Register all top-level commands in the click app."""
    for cmd, info in GENERATOR_COMMANDS.items():
        _register_passthrough_command(cmd, info["description"])

    @click.command(name="help", help="Show help message")
    def _help_cmd() -> int:
        print_help()
        return 0

    _click_cli.add_command(_help_cmd)


_register_commands()

CLI = _click_cli


def main() -> int:
    """Main CLI entry point."""
    if len(sys.argv) < _MIN_ARGS or sys.argv[1] in ["help", "--help", "-h"]:
        print_help()
        return 0

    try:
        result = _click_cli.main(
            args=sys.argv[1:],
            prog_name="civix",
            standalone_mode=False,
        )
    except click.Abort:
        print("\n⚠️  Cancelled by user")
        return 130
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    return 0 if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())
