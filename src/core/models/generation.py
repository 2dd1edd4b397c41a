"""
Generation models — the request/response contract of the engine.

Requests come in from the CLI or the HTTP API; results go back out
unchanged. Wire format uses camelCase keys (``platformSlug``,
``setupCommands``) while Python code uses snake_case attributes.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    """Base for models that cross the inbound boundary."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """Serialize with wire (camelCase) keys."""
        return self.model_dump(by_alias=True)


class GenerationRequest(_WireModel):
    """What the user wants installed, and where."""

    platform_slug: str = Field(min_length=1)
    application_ids: list[str] = Field(min_length=1)
    preferred_source_slug: str | None = None
    # nix-shell | nix-env | nix-flakes; unknown values fall back to nix-shell
    nix_installer_variant: str | None = None


class UninstallRequest(GenerationRequest):
    """What the user wants removed, and how thoroughly."""

    include_dependency_cleanup: bool = False
    include_setup_cleanup: bool = False


class PackageBreakdown(_WireModel):
    """Which package identifiers one source contributed."""

    source: str
    packages: list[str] = Field(default_factory=list)


class GenerationResult(_WireModel):
    """Install commands, one-time setup steps, and soft failures."""

    commands: list[str] = Field(default_factory=list)
    setup_commands: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    breakdown: list[PackageBreakdown] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """Whether nothing could be installed."""
        return not self.commands


class ManualUninstallStep(_WireModel):
    """Instructions for an app that has no scripted uninstall."""

    app_name: str
    instructions: str


class UninstallResult(_WireModel):
    """Removal commands plus optional cleanup of setup and dependencies."""

    commands: list[str] = Field(default_factory=list)
    cleanup_commands: list[str] = Field(default_factory=list)
    dependency_cleanup_commands: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    breakdown: list[PackageBreakdown] = Field(default_factory=list)
    manual_steps: list[ManualUninstallStep] = Field(default_factory=list)
