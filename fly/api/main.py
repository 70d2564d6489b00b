import logging
import os
import sys

from pydantic import ValidationError
from pydantic_settings import (
    CliApp,
    SettingsError,
)

from .cmdline import CLIArguments
from .errors import FlyAPIError


def main() -> None:
    """Main entry point for the command line client."""
    logging.basicConfig(level=os.getenv("FLY_API_LOG_LEVEL", "WARNING").upper())
    try:
        CliApp.run(CLIArguments)
    except (ValidationError, SettingsError, FlyAPIError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
