"""
Environment based configuration for tinysh

Settings are read once at startup; the search path and home directory are
handed to the pipeline as an immutable ShellContext.
"""

import os
from dataclasses import dataclass
from typing import Mapping

TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class ShellContext:
    """Process-wide state the command pipeline needs"""

    search_path: tuple[str, ...] = ()
    home: str | None = None


class Config:
    """Global configuration for tinysh"""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._load_from_environment(os.environ if environ is None else environ)

    def _load_from_environment(self, environ: Mapping[str, str]) -> None:
        """Load configuration from environment variables"""
        raw_path = environ.get("PATH", "")
        self.search_path = tuple(raw_path.split(os.pathsep)) if raw_path else ()
        self.home = environ.get("HOME")

        # Logging configuration
        self.log_level = environ.get("TINYSH_LOG_LEVEL", "WARNING").upper()

        # Prompt backend, readline unless asked otherwise
        self.prompt_toolkit = (
            environ.get("TINYSH_PROMPT_TOOLKIT", "").strip().lower() in TRUE_VALUES
        )

    def context(self) -> ShellContext:
        return ShellContext(search_path=self.search_path, home=self.home)


_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration, loading it on first use"""
    global _config
    if _config is None:
        _config = Config()
    return _config
