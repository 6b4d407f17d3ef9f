"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from resume_assistant.errors import ConfigError

HEURISTIC_SETS = ("text", "random")


@dataclass(frozen=True)
class InterviewConfig:
    synthesis_delay_seconds: float = 0.0
    validate_answers: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.synthesis_delay_seconds <= 10:
            raise ConfigError(
                f"synthesis_delay_seconds must be between 0 and 10, got {self.synthesis_delay_seconds}"
            )


@dataclass(frozen=True)
class SynthesisConfig:
    default_years_experience: int = 3
    default_role: str = "Professional"
    default_industry: str = "Technology"

    def __post_init__(self) -> None:
        if self.default_years_experience < 0:
            raise ConfigError(
                f"default_years_experience must be >= 0, got {self.default_years_experience}"
            )


@dataclass(frozen=True)
class AnalysisConfig:
    heuristics: str = "text"
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.heuristics not in HEURISTIC_SETS:
            raise ConfigError(
                f"heuristics must be one of {', '.join(HEURISTIC_SETS)}, got {self.heuristics!r}"
            )


@dataclass(frozen=True)
class AppConfig:
    interview: InterviewConfig = field(default_factory=InterviewConfig)
    synthesis: SynthesisConfig = field(default_factory=SynthesisConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        interview=InterviewConfig(**raw.get("interview", {})),
        synthesis=SynthesisConfig(**raw.get("synthesis", {})),
        analysis=AnalysisConfig(**raw.get("analysis", {})),
    )
