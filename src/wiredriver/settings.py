"""Pydantic-based settings loaded from YAML with env-var overrides."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from wiredriver.exceptions import ConfigurationError

DEFAULT_EXECUTOR = "http://127.0.0.1:4444/wd/hub"
MAX_REDIRECTS = 10

_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


def _default_capabilities() -> dict[str, Any]:
    return {"browserName": "chrome", "takesScreenshot": True}


class DriverSettings(BaseSettings):
    """Client configuration with YAML + env var support.

    Env vars are prefixed with ``WIREDRIVER_``.
    Example: ``WIREDRIVER_EXECUTOR=http://grid.local:4444/wd/hub``
    """

    model_config = {"env_prefix": "WIREDRIVER_"}

    # --- remote end ---
    executor: str = DEFAULT_EXECUTOR
    capabilities: dict[str, Any] = Field(default_factory=_default_capabilities)

    # --- transport ---
    max_redirects: int = MAX_REDIRECTS
    connect_timeout: float = 10.0
    read_timeout: float | None = None  # None = wait for the server

    # --- diagnostics ---
    screenshot_dir: str = "."
    log_level: str = "INFO"

    @field_validator("executor")
    @classmethod
    def _strip_executor(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        return v or DEFAULT_EXECUTOR

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v!r}")
        return level

    # ---- factory ----

    @classmethod
    def from_yaml(cls, path: str | Path | None = None) -> "DriverSettings":
        """Load settings from a YAML file, then overlay env vars.

        Env vars (``WIREDRIVER_*``) take priority over YAML values.
        """
        import os

        if path is None:
            path = _PROJECT_ROOT / "wiredriver.yaml"
        path = Path(path)
        raw: dict[str, Any] = {}
        if path.exists():
            try:
                with open(path) as fh:
                    raw = yaml.safe_load(fh) or {}
            except (OSError, yaml.YAMLError) as exc:
                raise ConfigurationError(f"Cannot read settings file {path}: {exc}") from exc
            if not isinstance(raw, dict):
                raise ConfigurationError(f"Settings file {path} must contain a mapping.")

        # Let env vars override YAML: remove YAML keys that have an env override
        prefix = "WIREDRIVER_"
        for key in list(raw.keys()):
            env_key = f"{prefix}{str(key).upper()}"
            if env_key in os.environ:
                del raw[key]

        return cls(**raw)
