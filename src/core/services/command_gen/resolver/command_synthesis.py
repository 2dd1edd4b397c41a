"""
L2 Resolver — Install command synthesis.

Turns selected packages into literal shell command strings.

Generic sources produce one combined command per source::

    sudo apt install -y firefox git

Script sources produce one download-and-run command per package.
Nix sources swap in the installer-variant templates, then follow the
generic path.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from src.core.models.catalog import FamilyCommand, Source
from src.core.services.command_gen.data.nix_templates import get_nix_template
from src.core.services.command_gen.domain.platform_rules import (
    OsToken,
    resolve_family_command,
    should_use_sudo,
    with_sudo,
)
from src.core.services.command_gen.domain.source_kind import SourceKind
from src.core.services.command_gen.resolver.package_selection import SelectedPackage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstallTemplates:
    """Install prefix and setup command in effect for one source group."""

    install_cmd: str
    setup_cmd: FamilyCommand


def group_by_source(selected: list[SelectedPackage]) -> dict[str, list[SelectedPackage]]:
    """Group selections by source slug.

    Sources keep first-seen order and packages keep selection order,
    so identical input always yields identical command order.
    """
    groups: dict[str, list[SelectedPackage]] = {}
    for sel in selected:
        groups.setdefault(sel.source_slug, []).append(sel)
    return groups


def resolve_install_templates(
    kind: SourceKind,
    source: Source,
    nix_installer_variant: str | None = None,
) -> InstallTemplates:
    """Templates for a source group.

    The stock source templates apply unless the source is Nix and the
    caller picked an installer variant.
    """
    match kind:
        case SourceKind.NIX if nix_installer_variant:
            template = get_nix_template(nix_installer_variant)
            return InstallTemplates(template.install_cmd, template.setup_cmd)
        case _:
            return InstallTemplates(source.install_cmd, source.setup_cmd)


def build_install_command(
    install_cmd: str,
    identifiers: list[str],
    require_sudo: bool,
    os_name: OsToken,
) -> str:
    """Generic form: ``[sudo ]<install_cmd> <id1> <id2> …``."""
    command = f"{install_cmd} {' '.join(identifiers)}"
    return with_sudo(command, should_use_sudo(require_sudo, os_name))


def build_script_command(script_url: str, os_name: OsToken) -> str:
    """Download-and-run command for an install script.

    Windows executables are downloaded then launched; other Windows
    scripts are piped to ``iex``; everything else is piped to bash.
    """
    if os_name == "windows":
        if script_url.endswith(".exe"):
            return f"irm {script_url} -OutFile installer.exe; .\\installer.exe"
        return f"irm {script_url} | iex"
    return f"curl -fsSL {script_url} | bash"


def synthesize_script_group(
    packages: list[SelectedPackage],
    os_name: OsToken,
) -> tuple[list[str], list[str], list[str]]:
    """One command per script package.

    Returns:
        ``(commands, identifiers, warnings)``. ``identifiers`` lists only
        the packages that produced a command.
    """
    commands: list[str] = []
    identifiers: list[str] = []
    warnings: list[str] = []

    for sel in packages:
        url = sel.metadata.script_url_for(os_name)
        if not url:
            warnings.append(f"{sel.app_name}: No install script available for {os_name}")
            logger.debug("No %s script URL for %s", os_name, sel.app_id)
            continue
        commands.append(build_script_command(url, os_name))
        identifiers.append(sel.identifier)

    return commands, identifiers, warnings


def collect_setup_commands(
    packages: list[SelectedPackage],
    source_setup_cmd: FamilyCommand,
    family: str,
    seen_sources: set[str],
    seen_commands: set[str],
) -> list[str]:
    """New setup commands contributed by one source group.

    Per-package setup (PPAs, COPR repos) comes first, deduplicated by
    text. The source's own setup command follows, at most once per
    source slug per call. ``seen_sources`` and ``seen_commands`` are
    updated in place.
    """
    commands: list[str] = []

    for sel in packages:
        pkg_setup = resolve_family_command(sel.package_setup_cmd, family)
        if pkg_setup and pkg_setup not in seen_commands:
            commands.append(pkg_setup)
            seen_commands.add(pkg_setup)

    slug = packages[0].source_slug
    if source_setup_cmd and slug not in seen_sources:
        src_setup = resolve_family_command(source_setup_cmd, family)
        if src_setup:
            commands.append(src_setup)
        seen_sources.add(slug)

    return commands
