"""
Catalog models — the read-only reference data the engine consumes.

Platforms, sources, applications, and packages are owned by the
surrounding product. The engine only ever reads them; they are loaded
once (from catalog.yml or a caller's own store) and validated here.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

logger = logging.getLogger(__name__)

# A setup/cleanup command: a universal string, or a distro-family map
# ({"debian": "...", "rhel": "...", "*": "..."}), or nothing.
FamilyCommand = Union[str, dict[str, Union[str, None]], None]


def _parse_json_field(value: Any) -> Any:
    """Decode a JSON-encoded mapping stored as text; keep plain strings."""
    if isinstance(value, str) and value.lstrip().startswith("{"):
        try:
            decoded = json.loads(value)
        except ValueError:
            return value
        if isinstance(decoded, dict):
            return decoded
    return value


class Source(BaseModel):
    """A package-distribution mechanism (apt, flatpak, script, …).

    ``install_cmd`` is a prefix — package identifiers are appended to it.
    """

    slug: str
    name: str
    install_cmd: str
    require_sudo: bool = False
    setup_cmd: FamilyCommand = None
    priority: int = 0

    # ── Removal (uninstall generator) ────────────────────────────
    remove_cmd: str | None = None
    cleanup_cmd: FamilyCommand = None
    supports_dependency_cleanup: bool = False
    dependency_cleanup_cmd: str | None = None


class PlatformSource(BaseModel):
    """A source as supported by one platform, with that platform's weight."""

    source: Source
    priority: int = 0
    is_default: bool = False

    @property
    def slug(self) -> str:
        return self.source.slug


class Platform(BaseModel):
    """A target install environment (a distro, or ``windows``)."""

    slug: str
    name: str
    family: str = ""  # debian, rhel, arch, nixos, windows …
    sources: list[PlatformSource] = Field(default_factory=list)

    @model_validator(mode="after")
    def _default_family(self) -> Platform:
        if not self.family:
            self.family = self.slug
        return self

    def source_map(self) -> dict[str, PlatformSource]:
        """Supported sources keyed by slug."""
        return {ps.slug: ps for ps in self.sources}

    def default_source(self) -> PlatformSource | None:
        """The source flagged default, if any."""
        for ps in self.sources:
            if ps.is_default:
                return ps
        return None


class ScriptUrls(BaseModel):
    """Install-script download URLs keyed by OS."""

    linux: str | None = None
    windows: str | None = None
    macos: str | None = None

    def for_os(self, os_name: str) -> str | None:
        return getattr(self, os_name, None)


class PackageMetadata(BaseModel):
    """Typed side record attached to a package.

    Only ``script_url`` matters to command generation; the other fields
    are carried for the catalog UI. Unknown keys are kept as extras.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    script_url: ScriptUrls | None = Field(
        default=None,
        validation_alias=AliasChoices("script_url", "scriptUrl"),
    )
    license: str | None = None
    homepage: str | None = None
    summary: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, data: Any) -> Any:
        """Accept JSON text; anything unparsable becomes empty metadata."""
        if data is None:
            return {}
        if isinstance(data, str):
            try:
                data = json.loads(data)
            except ValueError:
                logger.debug("Discarding unparsable package metadata")
                return {}
        if not isinstance(data, dict):
            return {}
        return data

    def script_url_for(self, os_name: str) -> str | None:
        """Script URL for ``os_name`` (``linux``/``windows``/``macos``)."""
        if self.script_url is None:
            return None
        return self.script_url.for_os(os_name)


class UninstallMetadata(BaseModel):
    """How to remove a script-installed application."""

    model_config = ConfigDict(populate_by_name=True)

    linux: str | None = None
    windows: str | None = None
    manual_instructions: str | None = Field(
        default=None,
        validation_alias=AliasChoices("manual_instructions", "manualInstructions"),
    )

    def for_os(self, os_name: str) -> str | None:
        return getattr(self, os_name, None)


class Package(BaseModel):
    """One way to obtain an application through one source.

    ``source`` is the source slug; the catalog resolves it to the
    ``Source`` record.
    """

    source: str
    identifier: str
    is_available: bool = True
    metadata: PackageMetadata = Field(default_factory=PackageMetadata)

    package_setup_cmd: FamilyCommand = None    # PPA, COPR, RPMFusion …
    package_cleanup_cmd: FamilyCommand = None  # reverse of package_setup_cmd
    uninstall_metadata: UninstallMetadata | None = None

    @field_validator("metadata", mode="before")
    @classmethod
    def _metadata_default(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("uninstall_metadata", mode="before")
    @classmethod
    def _decode_uninstall(cls, value: Any) -> Any:
        """JSON text or a mapping; anything else means no uninstall metadata."""
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except ValueError:
                logger.debug("Discarding unparsable uninstall metadata")
                return None
        if isinstance(value, (dict, UninstallMetadata)):
            return value
        return None

    @field_validator("package_setup_cmd", "package_cleanup_cmd", mode="before")
    @classmethod
    def _decode_command(cls, value: Any) -> Any:
        return _parse_json_field(value)


class Application(BaseModel):
    """A catalog entry the user can request."""

    id: str
    name: str
    packages: list[Package] = Field(default_factory=list)

    def available_packages(self) -> list[Package]:
        """Packages currently marked available, in catalog order."""
        return [p for p in self.packages if p.is_available]
