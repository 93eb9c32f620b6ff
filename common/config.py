"""Environment-driven settings for the CLI and the HTTP API."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

DEV_ENVIRONMENTS = {"dev", "development"}


@dataclass(frozen=True)
class Settings:
    env_name: str = "prod"
    log_level: str = "WARNING"
    allowed_origins: List[str] = field(default_factory=list)

    @property
    def is_dev(self) -> bool:
        return self.env_name in DEV_ENVIRONMENTS

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        raw_origins = env.get("EXPENSE_TRACKER_ALLOWED_ORIGINS") or ""
        return cls(
            env_name=env.get("EXPENSE_TRACKER_ENV", "prod").strip().lower(),
            log_level=(env.get("EXPENSE_TRACKER_LOG_LEVEL") or "WARNING").strip().upper(),
            allowed_origins=[origin.strip() for origin in raw_origins.split(",") if origin.strip()],
        )
