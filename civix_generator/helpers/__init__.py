"""Helpers shared by the CLI and the generators."""
