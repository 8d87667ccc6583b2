import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_DATA_FILE = Path(__file__).parent / "data" / "job_data.csv"


def load_env() -> None:
    """Load .env from the working directory if present."""
    env_path = Path.cwd() / ".env"
    if not env_path.exists():
        return
    load_dotenv(dotenv_path=env_path)


@dataclass(frozen=True)
class Settings:
    data_file: Path = DEFAULT_DATA_FILE
    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "INFO"
    log_dir: Optional[Path] = None
    debug: bool = False


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def get_settings() -> Settings:
    """Build settings from TECHJOBS_* environment variables."""
    port_raw = os.getenv("TECHJOBS_PORT", "8080")
    try:
        port = int(port_raw)
    except ValueError:
        raise ValueError(f"TECHJOBS_PORT must be an integer, got {port_raw!r}")

    data_file = os.getenv("TECHJOBS_DATA_FILE")
    log_dir = os.getenv("TECHJOBS_LOG_DIR")
    return Settings(
        data_file=Path(data_file) if data_file else DEFAULT_DATA_FILE,
        host=os.getenv("TECHJOBS_HOST", "127.0.0.1"),
        port=port,
        log_level=os.getenv("TECHJOBS_LOG_LEVEL", "INFO").upper(),
        log_dir=Path(log_dir) if log_dir else None,
        debug=_as_bool(os.getenv("TECHJOBS_DEBUG", "")),
    )
