"""CLI command implementations for the pudelko application.

This package contains catalog subcommands for the pudelko CLI:
- sort: List a catalog ordered by volume
- validate: Validate a catalog file
"""

from pudelko.cli.commands.sort import sort_command
from pudelko.cli.commands.validate import validate_command

__all__ = ["sort_command", "validate_command"]
