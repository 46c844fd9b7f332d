"""Settings loaded from the environment.

Variables:

- ``RNDSTRING_GENERATOR``: default generator name for the CLI
- ``RNDSTRING_LENGTH``: default token length
- ``RNDSTRING_STRICT``: refuse to use the fallback source (1/true/yes/on)
- ``RNDSTRING_LOG_LEVEL``: logging level name for the CLI
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

ENV_PREFIX = "RNDSTRING_"
_TRUE = {"1", "true", "yes", "on"}


def _env_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(ENV_PREFIX + key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{key} must be an integer, got {raw!r}") from None


@dataclass
class Settings:
    generator: str = "letters&digits"
    length: int = 24
    strict: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> Settings:
        """Build settings from *env* (``os.environ`` by default)."""
        env = os.environ if env is None else env
        defaults = cls()
        return cls(
            generator=env.get(ENV_PREFIX + "GENERATOR") or defaults.generator,
            length=_env_int(env, "LENGTH", defaults.length),
            strict=env.get(ENV_PREFIX + "STRICT", "").strip().lower() in _TRUE,
            log_level=(env.get(ENV_PREFIX + "LOG_LEVEL") or defaults.log_level).upper(),
        )

    def configure_logging(self, verbose: int = 0) -> None:
        """Send library logs to stderr; each *verbose* step lowers the level."""
        level = logging.getLevelName(self.log_level)
        if not isinstance(level, int):
            level = logging.WARNING
        level = max(logging.DEBUG, level - 10 * verbose)
        logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
