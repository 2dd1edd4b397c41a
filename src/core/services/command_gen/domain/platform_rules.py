"""
L1 Domain — Platform-dependent command rules (pure).

OS detection from the platform slug, sudo policy, and resolution of
distro-family command maps. No I/O.
"""

from __future__ import annotations

from typing import Literal

from src.core.models.catalog import FamilyCommand
from src.core.services.command_gen.data.constants import (
    FAMILY_WILDCARD,
    WINDOWS_PLATFORM_SLUG,
)

OsToken = Literal["windows", "linux"]


def detect_os(platform_slug: str) -> OsToken:
    """Simplified OS token: ``windows`` for the windows platform, else ``linux``."""
    return "windows" if platform_slug == WINDOWS_PLATFORM_SLUG else "linux"


def should_use_sudo(require_sudo: bool, os_name: OsToken) -> bool:
    """Windows has no sudo; elsewhere honor the source flag."""
    return require_sudo and os_name != "windows"


def with_sudo(command: str, use_sudo: bool) -> str:
    """Prefix ``sudo`` when required."""
    return f"sudo {command}" if use_sudo else command


def resolve_family_command(command: FamilyCommand, family: str) -> str | None:
    """Pick the command for a distro family.

    A plain string is universal. A mapping is looked up by ``family``,
    falling back to the ``"*"`` key. Empty values count as absent.
    """
    if not command:
        return None
    if isinstance(command, str):
        return command
    return command.get(family) or command.get(FAMILY_WILDCARD) or None
