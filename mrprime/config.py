from __future__ import annotations
import logging, os, random
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .errors import ConfigError
from .miller_rabin import DEFAULT_ROUNDS

ENV_ROUNDS    = "MRPRIME_ROUNDS"
ENV_SEED      = "MRPRIME_SEED"
ENV_LOG_LEVEL = "MRPRIME_LOG_LEVEL"
ENV_LOG_PATH  = "MRPRIME_LOG_PATH"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _int_setting(env: Mapping[str, str], name: str, default: Optional[int]) -> Optional[int]:
    raw = (env.get(name, "") or "").strip()
    if not raw:
        return default
    try:
        return int(raw, 10)
    except ValueError:
        raise ConfigError(name, raw, "not an integer") from None


@dataclass(frozen=True)
class Settings:
    rounds: int = DEFAULT_ROUNDS
    seed: Optional[int] = None
    log_level: str = "WARNING"
    log_path: Optional[str] = None

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Read MRPRIME_* variables (os.environ unless `env` is given)."""
        env = os.environ if env is None else env
        rounds = _int_setting(env, ENV_ROUNDS, DEFAULT_ROUNDS)
        if rounds <= 0:
            raise ConfigError(ENV_ROUNDS, str(rounds), "must be positive")
        seed = _int_setting(env, ENV_SEED, None)
        level = (env.get(ENV_LOG_LEVEL, "") or "WARNING").strip().upper()
        if level not in _LEVELS:
            raise ConfigError(ENV_LOG_LEVEL, level, f"expected one of {', '.join(_LEVELS)}")
        path = (env.get(ENV_LOG_PATH, "") or "").strip() or None
        return cls(rounds=rounds, seed=seed, log_level=level, log_path=path)

    def override(self, **changes) -> "Settings":
        """Copy with every non-None keyword applied (CLI flags win over env)."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)
