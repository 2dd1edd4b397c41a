"""
L1 Domain — Source kind classification (pure).

Most sources follow one generic rule: ``install_cmd`` + identifiers.
A small closed set needs bespoke handling. The kind is resolved once
per source group, and the synthesizers ``match`` on it.
"""

from __future__ import annotations

from enum import Enum

from src.core.services.command_gen.data.constants import (
    NIX_SOURCE_SLUG,
    SCRIPT_SOURCE_SLUG,
)


class SourceKind(Enum):
    """How commands for a source are synthesized."""

    GENERIC = "generic"
    SCRIPT = "script"    # one download-and-run command per package
    NIX = "nix"          # templates chosen by installer variant


_SPECIAL_KINDS: dict[str, SourceKind] = {
    SCRIPT_SOURCE_SLUG: SourceKind.SCRIPT,
    NIX_SOURCE_SLUG: SourceKind.NIX,
}


def classify_source(slug: str) -> SourceKind:
    """Resolve the synthesis kind for a source slug."""
    return _SPECIAL_KINDS.get(slug, SourceKind.GENERIC)
