"""
CLI Configuration

Centralized configuration for the docgraph CLI subsystem.
"""

import os
from typing import Optional


class CLIConfig:
    """Configuration for CLI commands"""

    # Indentation used for human-readable JSON
    JSON_INDENT = 2

    # Machine mode (pure data output, no presentation)
    _machine_mode: Optional[bool] = None

    @classmethod
    def set_machine_mode(cls, enabled: Optional[bool]) -> None:
        """Set machine mode; None falls back to the environment."""
        cls._machine_mode = enabled

    @classmethod
    def is_machine_mode(cls) -> bool:
        """
        Check if machine mode is active.

        Machine mode is the default. Returns False only if human mode is
        explicitly requested via --human or DOCGRAPH_HUMAN_MODE.
        """
        if cls._machine_mode is not None:
            return cls._machine_mode
        if os.getenv("DOCGRAPH_HUMAN_MODE", "").lower() in ("1", "true", "yes"):
            return False
        return True
