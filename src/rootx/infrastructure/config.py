"""Runtime settings, read once from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:

    data_dir: Path = _DEFAULT_DATA_DIR
    host: str = "0.0.0.0"
    port: int = 8000
    api_prefix: str = ""
    cors_origins: tuple[str, ...] = ("*",)
    store_timeout: float = 30.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        origins = env.get("ROOTX_CORS_ORIGINS", "*")
        return cls(
            data_dir=Path(env.get("ROOTX_DATA_DIR", str(_DEFAULT_DATA_DIR))),
            host=env.get("ROOTX_HOST", "0.0.0.0"),
            port=int(_number(env, "PORT", "8000")),
            api_prefix=env.get("ROOTX_API_PREFIX", "").rstrip("/"),
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
            store_timeout=_number(env, "ROOTX_STORE_TIMEOUT", "30"),
            log_level=env.get("ROOTX_LOG_LEVEL", "INFO").upper(),
        )


def _number(env: Mapping[str, str], name: str, default: str) -> float:
    raw = env.get(name, default)
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value
