"""
MFL Driver Configuration
========================

Immutable configuration for the ``mfl`` command, built once from the
command line and never modified afterwards.

Configuration can come from:
- Default values (defined here)
- Environment variables
- Command-line options (highest priority)
"""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional


DEFAULT_PROMPT = "mfl> "
DEFAULT_QUIT_COMMAND = ".quit"


@dataclass(frozen=True)
class DriverConfig:
    """
    Configuration for one run of the mfl driver.

    Attributes:
        file: Source file to scan; None selects interactive mode
        verbose: Enable debug logging
        show_license: Print the license banner before interactive mode
        prompt: Interactive prompt text (default: "mfl> ")
        quit_command: Line that leaves interactive mode (default: ".quit")
    """

    file: Optional[Path] = None
    verbose: bool = False
    show_license: bool = True
    prompt: str = DEFAULT_PROMPT
    quit_command: str = DEFAULT_QUIT_COMMAND

    @property
    def interactive(self) -> bool:
        """True when no source file was given."""
        return self.file is None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DriverConfig":
        """
        Create DriverConfig from environment variables.

        Environment variables (all optional):
            MFL_PROMPT: Interactive prompt text
            MFL_QUIT_COMMAND: Line that leaves interactive mode

        Args:
            environ: Mapping to read instead of os.environ (for testing)

        Returns:
            DriverConfig with values from environment variables
        """
        if environ is None:
            environ = os.environ

        config = cls()

        if prompt := environ.get("MFL_PROMPT"):
            config = replace(config, prompt=prompt)

        # A blank quit command would end the session on every empty line
        if quit_command := environ.get("MFL_QUIT_COMMAND", "").strip():
            config = replace(config, quit_command=quit_command)

        return config

    @classmethod
    def from_options(
        cls,
        file: Optional[Path] = None,
        verbose: bool = False,
        show_license: bool = True,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "DriverConfig":
        """
        Create DriverConfig from parsed command-line options.

        Environment values are applied first; options override them.
        """
        return replace(
            cls.from_env(environ),
            file=file,
            verbose=verbose,
            show_license=show_license,
        )
