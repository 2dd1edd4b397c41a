"""
Catalog loader — reads catalog.yml into domain models.

This is the primary entry point for loading reference data. It reads
YAML, validates against Pydantic schemas, resolves source references,
and returns a ready ``CatalogStore``.

File shape::

    sources:
      - slug: apt
        name: APT
        install_cmd: apt install -y
        require_sudo: true
    platforms:
      - slug: ubuntu
        name: Ubuntu
        family: debian
        sources:
          - source: apt
            priority: 10
            default: true
    applications:
      - id: firefox
        name: Firefox
        packages:
          - source: apt
            identifier: firefox
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from src.core.models.catalog import Application, Platform, PlatformSource, Source
from src.core.services.catalog_store import CatalogStore

logger = logging.getLogger(__name__)

# Default catalog filename
CATALOG_FILE = "catalog.yml"

# Environment override for the catalog path
CATALOG_ENV_VAR = "LINITE_CATALOG"

# Catalog shipped with the package
BUNDLED_CATALOG = Path(__file__).resolve().parent.parent / "data" / CATALOG_FILE


class ConfigError(Exception):
    """Raised when the catalog file is invalid or missing."""


# ── Raw file schema ─────────────────────────────────────────────


class _PlatformSourceRef(BaseModel):
    """A platform's reference to a source, by slug."""

    source: str
    priority: int | None = None   # None: use the source's base priority
    default: bool = False


class _PlatformEntry(BaseModel):
    slug: str
    name: str
    family: str = ""
    sources: list[_PlatformSourceRef] = Field(default_factory=list)


class _CatalogFile(BaseModel):
    sources: list[Source] = Field(default_factory=list)
    platforms: list[_PlatformEntry] = Field(default_factory=list)
    applications: list[Application] = Field(default_factory=list)


# ── Discovery ───────────────────────────────────────────────────


def find_catalog_file(start_dir: Path | None = None) -> Path | None:
    """Search for catalog.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to catalog.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CATALOG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def resolve_catalog_path(path: Path | None = None) -> Path:
    """Pick the catalog file to load.

    Precedence: explicit path > LINITE_CATALOG > catalog.yml found
    walking up from cwd > the bundled catalog.
    """
    if path is not None:
        return path
    env_path = os.environ.get(CATALOG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return find_catalog_file() or BUNDLED_CATALOG


# ── Loading ─────────────────────────────────────────────────────


def load_catalog(path: Path | None = None) -> CatalogStore:
    """Load and validate a catalog file.

    Args:
        path: Explicit path to catalog.yml. If None, see ``resolve_catalog_path``.

    Returns:
        CatalogStore with resolved platforms and applications.

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid.
    """
    path = resolve_catalog_path(path)

    if not path.is_file():
        raise ConfigError(f"Catalog file not found: {path}")

    logger.debug("Loading catalog from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    store = build_catalog(data, origin=str(path))
    logger.info(
        "Loaded catalog with %d platforms and %d applications",
        len(store.platforms), len(store.applications),
    )
    return store


def build_catalog(data: dict, origin: str = "<catalog>") -> CatalogStore:
    """Validate raw catalog data and resolve source references.

    Raises:
        ConfigError: On schema errors or references to undeclared sources.
    """
    try:
        parsed = _CatalogFile.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid catalog in {origin}: {e}") from e

    sources = {s.slug: s for s in parsed.sources}

    platforms: list[Platform] = []
    for entry in parsed.platforms:
        refs: list[PlatformSource] = []
        for ref in entry.sources:
            source = sources.get(ref.source)
            if source is None:
                raise ConfigError(
                    f"Platform '{entry.slug}' references unknown source '{ref.source}'"
                )
            refs.append(PlatformSource(
                source=source,
                priority=source.priority if ref.priority is None else ref.priority,
                is_default=ref.default,
            ))
        platforms.append(Platform(
            slug=entry.slug, name=entry.name, family=entry.family, sources=refs,
        ))

    for app in parsed.applications:
        for pkg in app.packages:
            if pkg.source not in sources:
                raise ConfigError(
                    f"Application '{app.id}' references unknown source '{pkg.source}'"
                )

    return CatalogStore(platforms=platforms, applications=parsed.applications)
