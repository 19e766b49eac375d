"""Environment-driven settings.

``UNISIG_ADAPTERS``      comma-separated adapter packages to import
``UNISIG_LOG_LEVEL``     level applied to the ``unisig`` logger by the CLI
``UNISIG_<GROUP>_<ALIAS>`` retarget a policy alias, e.g.
                         ``UNISIG_PQ_RECOMMENDED=dilithium87``
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

ENV_PREFIX = "UNISIG_"
DEFAULT_ADAPTERS: Tuple[str, ...] = ("unisig_classic", "unisig_pq", "unisig_kex")
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    adapters: Tuple[str, ...] = DEFAULT_ADAPTERS
    log_level: str = "WARNING"

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def alias_env_var(group: str, alias: str) -> str:
    return f"{ENV_PREFIX}{group}_{alias}".upper()


def env_override(env_var: Optional[str], environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return a non-empty override value for ``env_var`` if one is set."""
    if not env_var:
        return None
    env = os.environ if environ is None else environ
    value = env.get(env_var, "").strip()
    return value or None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    raw_adapters = env.get(f"{ENV_PREFIX}ADAPTERS", "")
    adapters = tuple(part.strip() for part in raw_adapters.split(",") if part.strip())
    level = env.get(f"{ENV_PREFIX}LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
    if level not in _LOG_LEVELS:
        raise ValueError(f"{ENV_PREFIX}LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")
    return Settings(adapters=adapters or DEFAULT_ADAPTERS, log_level=level)
