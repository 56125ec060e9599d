"""Application settings loaded from environment variables."""

import os
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

PACKAGE_DIR = Path(__file__).resolve().parent.parent


def _default_config_dir() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "iconflavor"


def _detect_true_color() -> bool:
    return os.environ.get("COLORTERM", "").lower() in ("truecolor", "24bit")


class AppSettings(BaseSettings):
    model_config = {"env_prefix": "ICONFLAVOR_", "env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    log_level: str = "INFO"
    config_dir: Path = Field(default_factory=_default_config_dir)
    runtime_dir: Path = PACKAGE_DIR / "runtime"

    icons: str = "default"
    theme: str = "default"
    true_color: bool = Field(default_factory=_detect_true_color)

    @field_validator("icons", "theme")
    @classmethod
    def non_empty_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("flavor name must not be empty")
        return v
