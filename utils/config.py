# utils/config.py

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from utils.errors import InvalidArgumentError

ENV_PREFIX = "TFIGURE_"


@dataclass
class Settings:
    """Window and export defaults."""
    width: int = 900
    height: int = 600
    dpi: int = 100
    export_dir: Path = field(default_factory=Path.cwd)
    log_level: str = "INFO"


def _read_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(ENV_PREFIX + key)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise InvalidArgumentError(f"{ENV_PREFIX}{key} must be an integer, got {raw!r}")
    if value <= 0:
        raise InvalidArgumentError(f"{ENV_PREFIX}{key} must be positive, got {value}")
    return value


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from TFIGURE_* environment variables.

    Parameters
    ----------
    env : mapping, optional
        Variables to read instead of os.environ.

    Returns
    -------
    Settings
        Defaults overridden by whichever variables are set.
    """
    env = os.environ if env is None else env
    defaults = Settings()

    export_dir = env.get(ENV_PREFIX + "EXPORT_DIR")
    log_level  = env.get(ENV_PREFIX + "LOG_LEVEL", defaults.log_level).strip().upper()

    return Settings(
        width=     _read_int(env, "WIDTH",  defaults.width),
        height=    _read_int(env, "HEIGHT", defaults.height),
        dpi=       _read_int(env, "DPI",    defaults.dpi),
        export_dir=Path(export_dir).expanduser() if export_dir else defaults.export_dir,
        log_level= log_level or defaults.log_level,
    )
