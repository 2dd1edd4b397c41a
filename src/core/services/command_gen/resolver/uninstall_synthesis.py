"""
L2 Resolver — Uninstall command synthesis.

Mirror of install synthesis: ``remove_cmd`` replaces ``install_cmd``,
cleanup commands reverse setup commands, and script-installed apps
use their uninstall metadata or manual instructions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from src.core.models.catalog import FamilyCommand, Source
from src.core.models.generation import ManualUninstallStep
from src.core.services.command_gen.data.nix_templates import (
    get_nix_template,
    normalize_nix_variant,
)
from src.core.services.command_gen.domain.platform_rules import (
    OsToken,
    resolve_family_command,
    should_use_sudo,
    with_sudo,
)
from src.core.services.command_gen.domain.source_kind import SourceKind
from src.core.services.command_gen.resolver.package_selection import SelectedPackage

logger = logging.getLogger(__name__)

NIX_SHELL_EPHEMERAL_WARNING = "nix-shell environments are ephemeral - no uninstall needed"


@dataclass(frozen=True)
class RemovalTemplates:
    """Remove prefix and cleanup command in effect for one source group."""

    remove_cmd: str | None
    cleanup_cmd: FamilyCommand
    ephemeral: bool = False  # nothing was installed, nothing to remove


def resolve_removal_templates(
    kind: SourceKind,
    source: Source,
    nix_installer_variant: str | None = None,
) -> RemovalTemplates:
    """Templates for removing a source group."""
    match kind:
        case SourceKind.NIX if nix_installer_variant:
            template = get_nix_template(nix_installer_variant)
            return RemovalTemplates(
                template.remove_cmd,
                template.cleanup_cmd,
                ephemeral=normalize_nix_variant(nix_installer_variant) == "nix-shell",
            )
        case _:
            return RemovalTemplates(source.remove_cmd, source.cleanup_cmd)


def build_remove_command(
    remove_cmd: str,
    identifiers: list[str],
    require_sudo: bool,
    os_name: OsToken,
) -> str:
    """Generic form: ``[sudo ]<remove_cmd> <id1> <id2> …``."""
    command = f"{remove_cmd} {' '.join(identifiers)}"
    return with_sudo(command, should_use_sudo(require_sudo, os_name))


def synthesize_script_removal(
    packages: list[SelectedPackage],
    os_name: OsToken,
) -> tuple[list[str], list[ManualUninstallStep], list[str]]:
    """Uninstall script-installed packages one by one.

    Returns:
        ``(commands, manual_steps, warnings)``.
    """
    commands: list[str] = []
    manual_steps: list[ManualUninstallStep] = []
    warnings: list[str] = []

    for sel in packages:
        meta = sel.uninstall_metadata
        if meta is None:
            warnings.append(
                f"{sel.app_name}: No uninstall metadata available for script-based installation"
            )
            continue

        script = meta.for_os(os_name)
        if script:
            commands.append(script)
        elif meta.manual_instructions:
            manual_steps.append(ManualUninstallStep(
                app_name=sel.app_name,
                instructions=meta.manual_instructions,
            ))
        else:
            warnings.append(
                f"{sel.app_name}: No uninstall method available for script-based installation"
            )

    return commands, manual_steps, warnings


def collect_cleanup_commands(
    packages: list[SelectedPackage],
    source_cleanup_cmd: FamilyCommand,
    family: str,
    seen_sources: set[str],
    seen_commands: set[str],
) -> list[str]:
    """Cleanup commands that undo one source group's setup.

    Same ordering and dedup rules as setup collection: per-package
    cleanups by text, then the source cleanup once per slug.
    """
    commands: list[str] = []

    for sel in packages:
        pkg_cleanup = resolve_family_command(sel.package_cleanup_cmd, family)
        if pkg_cleanup and pkg_cleanup not in seen_commands:
            commands.append(pkg_cleanup)
            seen_commands.add(pkg_cleanup)

    slug = packages[0].source_slug
    if source_cleanup_cmd and slug not in seen_sources:
        src_cleanup = resolve_family_command(source_cleanup_cmd, family)
        if src_cleanup:
            commands.append(src_cleanup)
        seen_sources.add(slug)

    return commands


def build_dependency_cleanup(source: Source, os_name: OsToken) -> str | None:
    """Orphaned-dependency cleanup for a source, if it supports one."""
    if not (source.supports_dependency_cleanup and source.dependency_cleanup_cmd):
        return None
    return with_sudo(
        source.dependency_cleanup_cmd,
        should_use_sudo(source.require_sudo, os_name),
    )
