"""CLI command implementations for the conduits application.

This package contains subcommands for the conduits CLI, including:
- validate: Validate a configuration file
"""

from conduits.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
