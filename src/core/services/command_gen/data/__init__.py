"""
L0 Data — ``__init__.py`` re-exports all data constants.
"""

from src.core.services.command_gen.data.constants import (  # noqa: F401
    DEFAULT_BONUS,
    FAMILY_WILDCARD,
    NIX_SOURCE_SLUG,
    NIXOS_PLATFORM_SLUG,
    PREFERENCE_BONUS,
    SCRIPT_SOURCE_SLUG,
    WINDOWS_PLATFORM_SLUG,
)
from src.core.services.command_gen.data.nix_templates import (  # noqa: F401
    DEFAULT_NIX_VARIANT,
    NIX_TEMPLATES,
    NixTemplate,
    get_nix_template,
    normalize_nix_variant,
)
