# ------------------------------------------------------------
# Module: querynode/core/config.py
# Purpose: Central, typed application settings with opt-in env overrides.
# ------------------------------------------------------------

"""Typed configuration hub for the query node.

Responsibilities
----------------
- Provide strongly-typed toggles for logging, SQLite access, and batch policy.
- Validate values early so misconfiguration fails at import, not mid-batch.
- Read `QUERYNODE_<FIELD>` environment overrides via pydantic-settings.

Notes
-----
- Defaults live in code; the environment only overrides named fields.
- Import `settings` anywhere; do not re-create Settings().
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration: code defaults, environment overrides.

    Notes
    -----
    - Extras are forbidden to surface typos/unknown keys early.
    - Only `QUERYNODE_`-prefixed variables naming a field are read;
      values are coerced by pydantic (e.g. "true", "8").
    """

    model_config = SettingsConfigDict(env_prefix="QUERYNODE_", extra="forbid")

    # App toggles
    APP_ENV: Literal["dev", "prod"] = "dev"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    ACCESS_LOG: bool = True
    MUTE_ALL_LOGS: bool = False

    # ---- SQLite access ----
    SQLITE_TIMEOUT_S: float = Field(
        5.0, gt=0.0, description="Seconds to wait on a locked database file"
    )
    SELECT_MAX_WORKERS: int = Field(
        4, ge=1, description="Thread pool size for split SELECT statements"
    )

    # ---- Batch / result shaping ----
    CONTINUE_ON_FAIL: bool = False
    STATUS_MESSAGE: str = "Query executed successfully."
    SPREAD_FIELD: str = "items"
    DEFAULT_ARGS: str = "{}"
    EXECUTION_SLA_MS: int = Field(
        1000, ge=1, description="Requests slower than this log at WARNING"
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @field_validator("SPREAD_FIELD", "STATUS_MESSAGE")
    @classmethod
    def _non_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v


settings = Settings()
