"""Runtime configuration read from environment variables."""
from __future__ import annotations

import os
import typing as t
from dataclasses import dataclass
from pathlib import Path

# === Base project path ===
PROJECT_ROOT = Path(__file__).resolve().parents[1]

# === Defaults ===
DEFAULT_MODEL = "gpt-4o"
DEFAULT_STRATEGY = "priority"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_PATH = PROJECT_ROOT / "study_planner.log"


@dataclass(frozen=True)
class Settings:
    """Settings for the study planner application."""
    openai_api_key: t.Optional[str] = None
    model: str = DEFAULT_MODEL
    base_url: t.Optional[str] = None  # any OpenAI-compatible endpoint, e.g. NVIDIA NIM
    strategy: str = DEFAULT_STRATEGY
    log_level: str = DEFAULT_LOG_LEVEL
    log_path: Path = DEFAULT_LOG_PATH


def load_settings(environ: t.Optional[t.Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        Settings with blank variables treated as unset.
    """
    env = os.environ if environ is None else environ

    def _get(key: str) -> t.Optional[str]:
        value = env.get(key, "").strip()
        return value or None

    log_path = _get("STUDY_PLANNER_LOG_PATH")
    return Settings(
        openai_api_key=_get("OPENAI_API_KEY"),
        model=_get("STUDY_PLANNER_MODEL") or DEFAULT_MODEL,
        base_url=_get("STUDY_PLANNER_BASE_URL"),
        strategy=(_get("STUDY_PLANNER_STRATEGY") or DEFAULT_STRATEGY).lower(),
        log_level=(_get("STUDY_PLANNER_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        log_path=Path(log_path) if log_path else DEFAULT_LOG_PATH,
    )
