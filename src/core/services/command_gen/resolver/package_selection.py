"""
L2 Resolver — Package selection.

Decides which package (and therefore which source) installs each
requested application on the target platform.

Resolution per application:
  1. Keep packages that are available AND whose source the platform supports
  2. Score each: platform-source priority
                 + PREFERENCE_BONUS if it is the caller's preferred source
                 + DEFAULT_BONUS if it is the platform's default source
  3. Highest score wins; ties go to the package listed first

An unavailable preference silently falls back to the best remaining
package. Applications with nothing eligible produce a warning.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from src.core.models.catalog import (
    Application,
    FamilyCommand,
    Package,
    PackageMetadata,
    Platform,
    PlatformSource,
    Source,
    UninstallMetadata,
)
from src.core.services.command_gen.data.constants import DEFAULT_BONUS, PREFERENCE_BONUS

logger = logging.getLogger(__name__)


@dataclass
class SelectedPackage:
    """The winning package for one application."""

    app_id: str
    app_name: str
    package: Package
    platform_source: PlatformSource
    calculated_priority: int

    @property
    def source(self) -> Source:
        return self.platform_source.source

    @property
    def source_slug(self) -> str:
        return self.platform_source.source.slug

    @property
    def identifier(self) -> str:
        return self.package.identifier

    @property
    def metadata(self) -> PackageMetadata:
        return self.package.metadata

    @property
    def package_setup_cmd(self) -> FamilyCommand:
        return self.package.package_setup_cmd

    @property
    def package_cleanup_cmd(self) -> FamilyCommand:
        return self.package.package_cleanup_cmd

    @property
    def uninstall_metadata(self) -> UninstallMetadata | None:
        return self.package.uninstall_metadata


def calculate_priority(
    platform_source: PlatformSource,
    preferred_source_slug: str | None = None,
) -> int:
    """Score a platform source for one selection.

    Args:
        platform_source: The platform's entry for the package's source.
        preferred_source_slug: The caller's preferred source, if any.

    Returns:
        Base priority plus preference and default bonuses.
    """
    total = platform_source.priority
    if preferred_source_slug and platform_source.slug == preferred_source_slug:
        total += PREFERENCE_BONUS
    if platform_source.is_default:
        total += DEFAULT_BONUS
    return total


def eligible_packages(
    app: Application,
    source_map: dict[str, PlatformSource],
) -> list[Package]:
    """Available packages whose source the platform supports, in catalog order."""
    return [
        pkg for pkg in app.packages
        if pkg.is_available and pkg.source in source_map
    ]


def select_best_package(
    packages: list[Package],
    source_map: dict[str, PlatformSource],
    preferred_source_slug: str | None = None,
) -> tuple[Package, int] | None:
    """Pick the highest-scoring package.

    ``max`` returns the first maximal element, so ties resolve to
    catalog order, the same result as a stable descending sort.

    Returns:
        ``(package, calculated_priority)`` or ``None`` if ``packages`` is empty.
    """
    if not packages:
        return None

    scored = [
        (pkg, calculate_priority(source_map[pkg.source], preferred_source_slug))
        for pkg in packages
    ]
    return max(scored, key=lambda item: item[1])


def select_packages(
    platform: Platform,
    applications: list[Application],
    preferred_source_slug: str | None = None,
) -> tuple[list[SelectedPackage], list[str]]:
    """Select one package per application.

    Args:
        platform: Target platform with its supported sources.
        applications: Requested applications, in processing order.
        preferred_source_slug: Optional source to favour.

    Returns:
        ``(selected, warnings)``: at most one ``SelectedPackage`` per
        application, in application order, plus one warning per
        application that has no eligible package.
    """
    source_map = platform.source_map()
    selected: list[SelectedPackage] = []
    warnings: list[str] = []

    for app in applications:
        candidates = eligible_packages(app, source_map)
        best = select_best_package(candidates, source_map, preferred_source_slug)
        if best is None:
            warnings.append(f"{app.name}: No package available for {platform.name}")
            logger.debug("No eligible package for %s on %s", app.id, platform.slug)
            continue

        pkg, priority = best
        logger.debug(
            "Selected %s/%s for %s (priority %d of %d candidates)",
            pkg.source, pkg.identifier, app.id, priority, len(candidates),
        )
        selected.append(SelectedPackage(
            app_id=app.id,
            app_name=app.name,
            package=pkg,
            platform_source=source_map[pkg.source],
            calculated_priority=priority,
        ))

    return selected, warnings
