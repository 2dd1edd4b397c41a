"""
Install script rendering — turn a generation result into a file.

Users who would rather download than copy-paste get a single bash
script (or a PowerShell script on Windows) containing the setup
commands followed by the install commands.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.models.generation import GenerationResult, UninstallResult
from src.core.services.command_gen.data.constants import (
    NIXOS_PLATFORM_SLUG,
    WINDOWS_PLATFORM_SLUG,
)

_BASH_SHEBANG = "#!/bin/bash"
_NIXOS_SHEBANG = "#!/run/current-system/sw/bin/bash"


@dataclass(frozen=True)
class InstallScript:
    """A rendered script ready to be written to disk or downloaded."""

    filename: str
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"filename": self.filename, "content": self.content}


def _header(platform_slug: str, title: str) -> list[str]:
    if platform_slug == WINDOWS_PLATFORM_SLUG:
        return [
            f"# Linite - {title}",
            "",
            f'Write-Host "Linite - {title}" -ForegroundColor Cyan',
        ]
    shebang = _NIXOS_SHEBANG if platform_slug == NIXOS_PLATFORM_SLUG else _BASH_SHEBANG
    return [
        shebang,
        "",
        f"# Linite - {title}",
    ]


def _extension(platform_slug: str) -> str:
    return "ps1" if platform_slug == WINDOWS_PLATFORM_SLUG else "sh"


def render_install_script(platform_slug: str, result: GenerationResult) -> InstallScript:
    """Render setup + install commands as a bash or PowerShell script."""
    lines = [
        *_header(platform_slug, "Bulk Package Installer"),
        "",
        *result.setup_commands,
        "",
        *result.commands,
    ]
    return InstallScript(
        filename=f"linite-install.{_extension(platform_slug)}",
        content="\n".join(lines) + "\n",
    )


def render_uninstall_script(platform_slug: str, result: UninstallResult) -> InstallScript:
    """Render cleanup + uninstall + dependency cleanup commands as a script."""
    lines = [
        *_header(platform_slug, "Bulk Package Uninstaller"),
        "",
        *result.cleanup_commands,
        "",
        *result.commands,
        "",
        *result.dependency_cleanup_commands,
    ]
    return InstallScript(
        filename=f"linite-uninstall.{_extension(platform_slug)}",
        content="\n".join(lines) + "\n",
    )
