"""
L0 Data — Nix installer-variant command templates.

NixOS users can install through ``nix-shell`` (ephemeral), ``nix-env``
(imperative profile), or flakes (``nix profile``). Each variant
replaces the stock ``nix`` source templates wholesale.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class NixTemplate:
    """Command templates for one Nix installer variant."""

    install_cmd: str
    setup_cmd: str | None
    remove_cmd: str | None      # None: nothing to uninstall
    cleanup_cmd: str | None


DEFAULT_NIX_VARIANT = "nix-shell"

NIX_TEMPLATES: MappingProxyType[str, NixTemplate] = MappingProxyType({
    "nix-env": NixTemplate(
        install_cmd="nix-env -iA nixpkgs.",
        setup_cmd="nix-channel --update",
        remove_cmd="nix-env -e",
        cleanup_cmd="nix-collect-garbage -d",
    ),
    "nix-flakes": NixTemplate(
        install_cmd="nix profile install nixpkgs#",
        setup_cmd=(
            "nix-channel --update && "
            'echo "experimental-features = nix-command flakes" >> ~/.config/nix/nix.conf'
        ),
        remove_cmd="nix profile remove",
        cleanup_cmd="nix-collect-garbage -d",
    ),
    # nix-shell environments are ephemeral
    "nix-shell": NixTemplate(
        install_cmd="nix-shell -p",
        setup_cmd=None,
        remove_cmd=None,
        cleanup_cmd=None,
    ),
})


def normalize_nix_variant(variant: str | None) -> str:
    """Map an installer-variant token to a known variant name."""
    if variant in NIX_TEMPLATES:
        return variant
    return DEFAULT_NIX_VARIANT


def get_nix_template(variant: str | None) -> NixTemplate:
    """Templates for ``variant``; absent or unknown tokens get nix-shell."""
    return NIX_TEMPLATES[normalize_nix_variant(variant)]
