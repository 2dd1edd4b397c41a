"""
L3 Orchestration — Install/uninstall command generation.

The single request/response entry point of the engine. Validates the
request against the catalog, selects one package per application,
synthesizes commands per source group, and assembles the result.

Hard failures (unknown platform, platform with no sources, no known
applications) raise ``GenerationError`` before any synthesis. Every
other irregularity becomes a warning on a successful result.
"""

from __future__ import annotations

import logging

from src.core.models.catalog import Application, Platform
from src.core.models.generation import (
    GenerationRequest,
    GenerationResult,
    PackageBreakdown,
    UninstallRequest,
    UninstallResult,
)
from src.core.services.catalog_store import CatalogLookup
from src.core.services.command_gen.domain.errors import (
    NoApplicationsError,
    NoSourcesError,
    PlatformNotFoundError,
)
from src.core.services.command_gen.domain.platform_rules import detect_os
from src.core.services.command_gen.domain.source_kind import SourceKind, classify_source
from src.core.services.command_gen.resolver.command_synthesis import (
    build_install_command,
    collect_setup_commands,
    group_by_source,
    resolve_install_templates,
    synthesize_script_group,
)
from src.core.services.command_gen.resolver.package_selection import select_packages
from src.core.services.command_gen.resolver.uninstall_synthesis import (
    NIX_SHELL_EPHEMERAL_WARNING,
    build_dependency_cleanup,
    build_remove_command,
    collect_cleanup_commands,
    resolve_removal_templates,
    synthesize_script_removal,
)

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
# Input resolution
# ═══════════════════════════════════════════════════════════════════


def resolve_inputs(
    catalog: CatalogLookup,
    platform_slug: str,
    application_ids: list[str],
) -> tuple[Platform, list[Application]]:
    """Look up the platform and applications, enforcing hard failures.

    Raises:
        PlatformNotFoundError: Unknown platform slug.
        NoSourcesError: Platform supports no sources.
        NoApplicationsError: None of the ids are known.
    """
    platform = catalog.get_platform(platform_slug)
    if platform is None:
        logger.warning("Unknown platform: %s", platform_slug)
        raise PlatformNotFoundError(platform_slug)

    _check_platform(platform)

    applications = catalog.get_applications(list(application_ids))
    if not applications:
        logger.warning("No known applications among %d ids", len(application_ids))
        raise NoApplicationsError(application_ids)

    return platform, applications


def _check_platform(platform: Platform) -> None:
    if not platform.sources:
        logger.warning("Platform %s has no sources", platform.slug)
        raise NoSourcesError(platform.name)


# ═══════════════════════════════════════════════════════════════════
# Install
# ═══════════════════════════════════════════════════════════════════


def build_install_result(
    platform: Platform,
    applications: list[Application],
    preferred_source_slug: str | None = None,
    nix_installer_variant: str | None = None,
) -> GenerationResult:
    """Pure core: generate install commands from resolved catalog data.

    Args:
        platform: Target platform (must have at least one source).
        applications: Applications in processing order.
        preferred_source_slug: Source to favour when an app offers it.
        nix_installer_variant: ``nix-shell`` / ``nix-env`` / ``nix-flakes``.

    Returns:
        Commands grouped per source, deduplicated setup commands,
        warnings in encounter order, and a per-source breakdown in
        command order.
    """
    _check_platform(platform)

    os_name = detect_os(platform.slug)
    selected, warnings = select_packages(platform, applications, preferred_source_slug)

    result = GenerationResult(warnings=warnings)
    seen_sources: set[str] = set()
    seen_setup: set[str] = set()

    for slug, pkgs in group_by_source(selected).items():
        source = pkgs[0].source
        kind = classify_source(slug)

        match kind:
            case SourceKind.SCRIPT:
                commands, identifiers, script_warnings = synthesize_script_group(pkgs, os_name)
                result.commands.extend(commands)
                result.warnings.extend(script_warnings)
                if identifiers:
                    result.breakdown.append(
                        PackageBreakdown(source=source.name, packages=identifiers)
                    )

            case SourceKind.NIX | SourceKind.GENERIC:
                templates = resolve_install_templates(kind, source, nix_installer_variant)
                result.setup_commands.extend(collect_setup_commands(
                    pkgs, templates.setup_cmd, platform.family, seen_sources, seen_setup,
                ))
                identifiers = [p.identifier for p in pkgs]
                result.commands.append(build_install_command(
                    templates.install_cmd, identifiers, source.require_sudo, os_name,
                ))
                result.breakdown.append(
                    PackageBreakdown(source=source.name, packages=identifiers)
                )

    logger.info(
        "Generated %d install command(s) for %d app(s) on %s (%d warning(s))",
        len(result.commands), len(applications), platform.slug, len(result.warnings),
    )
    return result


def generate_install_commands(
    request: GenerationRequest,
    catalog: CatalogLookup,
) -> GenerationResult:
    """Resolve ``request`` against ``catalog`` and generate install commands."""
    platform, applications = resolve_inputs(
        catalog, request.platform_slug, request.application_ids,
    )
    return build_install_result(
        platform,
        applications,
        preferred_source_slug=request.preferred_source_slug,
        nix_installer_variant=request.nix_installer_variant,
    )


# ═══════════════════════════════════════════════════════════════════
# Uninstall
# ═══════════════════════════════════════════════════════════════════


def build_uninstall_result(
    platform: Platform,
    applications: list[Application],
    preferred_source_slug: str | None = None,
    nix_installer_variant: str | None = None,
    include_dependency_cleanup: bool = False,
    include_setup_cleanup: bool = False,
) -> UninstallResult:
    """Pure core: generate uninstall commands from resolved catalog data.

    Selection is identical to install, so the package removed is the
    one the same preferences would have installed.
    """
    _check_platform(platform)

    os_name = detect_os(platform.slug)
    selected, warnings = select_packages(platform, applications, preferred_source_slug)

    result = UninstallResult(warnings=warnings)
    seen_sources: set[str] = set()
    seen_cleanup: set[str] = set()

    for slug, pkgs in group_by_source(selected).items():
        source = pkgs[0].source
        kind = classify_source(slug)
        identifiers = [p.identifier for p in pkgs]

        match kind:
            case SourceKind.SCRIPT:
                commands, manual_steps, script_warnings = synthesize_script_removal(pkgs, os_name)
                result.commands.extend(commands)
                result.manual_steps.extend(manual_steps)
                result.warnings.extend(script_warnings)
                result.breakdown.append(PackageBreakdown(source=source.name, packages=identifiers))
                continue

            case SourceKind.NIX | SourceKind.GENERIC:
                templates = resolve_removal_templates(kind, source, nix_installer_variant)

        if templates.ephemeral:
            result.warnings.append(NIX_SHELL_EPHEMERAL_WARNING)
            continue

        if not templates.remove_cmd:
            for sel in pkgs:
                result.warnings.append(
                    f"{sel.app_name}: Uninstall not supported for {source.name} source"
                )
            continue

        if include_setup_cleanup:
            result.cleanup_commands.extend(collect_cleanup_commands(
                pkgs, templates.cleanup_cmd, platform.family, seen_sources, seen_cleanup,
            ))

        result.commands.append(build_remove_command(
            templates.remove_cmd, identifiers, source.require_sudo, os_name,
        ))

        if include_dependency_cleanup:
            dep_cleanup = build_dependency_cleanup(source, os_name)
            if dep_cleanup and dep_cleanup not in result.dependency_cleanup_commands:
                result.dependency_cleanup_commands.append(dep_cleanup)

        result.breakdown.append(PackageBreakdown(source=source.name, packages=identifiers))

    logger.info(
        "Generated %d uninstall command(s) for %d app(s) on %s (%d warning(s))",
        len(result.commands), len(applications), platform.slug, len(result.warnings),
    )
    return result


def generate_uninstall_commands(
    request: UninstallRequest,
    catalog: CatalogLookup,
) -> UninstallResult:
    """Resolve ``request`` against ``catalog`` and generate uninstall commands."""
    platform, applications = resolve_inputs(
        catalog, request.platform_slug, request.application_ids,
    )
    return build_uninstall_result(
        platform,
        applications,
        preferred_source_slug=request.preferred_source_slug,
        nix_installer_variant=request.nix_installer_variant,
        include_dependency_cleanup=request.include_dependency_cleanup,
        include_setup_cleanup=request.include_setup_cleanup,
    )
