"""Pydantic models describing locator configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class XcconfigSettings(BaseModel):
    """Where the generated xcconfig lives and which key holds the SDK root."""

    model_config = ConfigDict(extra="forbid")

    relative_path: Path = Path("ephemeral") / "Flutter-Generated.xcconfig"
    marker: str = "FLUTTER_ROOT="
    missing_hint: str = "Run `flutter pub get` first."

    @field_validator("marker")
    @classmethod
    def _marker_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("marker must not be blank.")
        return value


class PlatformProfile(BaseModel):
    """Delegate candidates for one platform, in priority order."""

    model_config = ConfigDict(extra="forbid")

    candidates: List[Path] = Field(min_length=1)


class RuntimeSettings(BaseModel):
    """Process-level knobs for logging and delegate execution."""

    model_config = ConfigDict(extra="allow")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_file: Optional[Path] = None
    interpreters: Dict[str, List[str]] = Field(
        default_factory=lambda: {".rb": ["ruby"], ".py": ["{python}"], ".sh": ["sh"]}
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class LocatorSettings(BaseModel):
    """Top-level configuration consumed by the CLI and pipeline."""

    model_config = ConfigDict(extra="forbid")

    platform: str = "macos"
    xcconfig: XcconfigSettings = Field(default_factory=XcconfigSettings)
    platforms: Dict[str, PlatformProfile] = Field(default_factory=dict)
    runtime: RuntimeSettings = Field(default_factory=RuntimeSettings)

    @model_validator(mode="after")
    def _validate_platform(self) -> "LocatorSettings":
        """Ensure the selected platform has a profile."""

        if self.platform not in self.platforms:
            known = ", ".join(sorted(self.platforms)) or "<none>"
            raise ValueError(f"Unknown platform '{self.platform}'; configured platforms: {known}.")
        return self

    @property
    def profile(self) -> PlatformProfile:
        return self.platforms[self.platform]

    @property
    def candidate_suffixes(self) -> list[Path]:
        return list(self.profile.candidates)


__all__ = ["LocatorSettings", "PlatformProfile", "RuntimeSettings", "XcconfigSettings"]
