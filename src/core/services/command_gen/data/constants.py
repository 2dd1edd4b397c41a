"""
L0 Data — Engine constants.

Pure data. No logic. No imports beyond stdlib.
"""

from __future__ import annotations

# Priority bonus for the caller's preferred source. Must dominate any
# plausible spread of platform base priorities.
PREFERENCE_BONUS = 100

# Priority bonus for the platform's default source.
DEFAULT_BONUS = 5

# Source slugs that do not follow the generic install template.
SCRIPT_SOURCE_SLUG = "script"
NIX_SOURCE_SLUG = "nix"

# The only platform slug treated as Windows; everything else is "linux".
WINDOWS_PLATFORM_SLUG = "windows"

# Platform slug that needs the NixOS shebang in rendered scripts.
NIXOS_PLATFORM_SLUG = "nixos"

# Fallback key inside a distro-family command map.
FAMILY_WILDCARD = "*"
