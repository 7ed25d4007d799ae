"""Configuration for tokenizer-cli."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .exceptions import ConfigurationError
from .registry import DEFAULT_MODEL

if TYPE_CHECKING:
    from .registry import ProviderRegistry

MODEL_ENV_VAR = "TOKENIZER_CLI_MODEL"
LOG_LEVEL_ENV_VAR = "TOKENIZER_CLI_LOG_LEVEL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"


@dataclass
class TokenizerConfig:
    """Runtime settings for the command-line front end.

    GOTCHAS:
    - default_model is only checked against a registry by validate();
      constructing a config with an unknown model does not fail.
    - Command-line flags override the environment, which overrides
      the defaults here.
    """

    default_model: str = DEFAULT_MODEL
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> TokenizerConfig:
        """Build a config from environment variables.

        Args:
            environ: Mapping to read instead of os.environ (for tests).

        Returns:
            TokenizerConfig with any overrides applied.
        """
        env = os.environ if environ is None else environ
        config = cls()

        model = env.get(MODEL_ENV_VAR, "").strip()
        if model:
            config.default_model = model

        level = env.get(LOG_LEVEL_ENV_VAR, "").strip()
        if level:
            config.log_level = level.upper()

        return config

    def validate(self, registry: ProviderRegistry) -> None:
        """Check the config against a registry.

        Raises:
            ConfigurationError: If the default model is unsupported or the
                log level is not a standard level name.
        """
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level '{self.log_level}'",
                details={"valid_levels": list(_LOG_LEVELS)},
            )
        if not registry.get_provider_info(self.default_model).found:
            raise ConfigurationError(
                f"default model {self.default_model} is not supported",
                details={"env_var": MODEL_ENV_VAR},
            )

    def configure_logging(self, verbose: bool = False) -> None:
        """Configure root logging. ``verbose`` forces DEBUG."""
        level = logging.DEBUG if verbose else getattr(logging, self.log_level.upper())
        logging.basicConfig(level=level, format=LOG_FORMAT)
