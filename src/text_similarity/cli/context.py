from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from text_similarity.config.settings import Settings
from text_similarity.logging_config import setup_logging


def load_default_env() -> None:
    """
    Load a project-level .env if present.
    Resolves to the repository root (three levels up from this file).
    """
    project_root = Path(__file__).resolve().parents[3]
    env_path = project_root / ".env"
    load_dotenv(dotenv_path=env_path, override=False)


@dataclass
class CLIContext:
    settings: Settings


def build_context(log_level: Optional[str] = None) -> CLIContext:
    load_default_env()

    settings = Settings()
    if log_level:
        settings.log_level = log_level.upper()
    setup_logging(settings.log_level)

    return CLIContext(settings=settings)
