"""
Install command generation — package re-exports.

Pick one package per requested application for a target platform and
turn the picks into copy-pasteable shell commands::

    from src.core.services.command_gen import generate_install_commands

Each symbol lives in its single-responsibility module inside the
appropriate onion layer (data → domain → resolver → orchestration).
"""

# ── L0: Data ──
from src.core.services.command_gen.data.nix_templates import (  # noqa: F401
    NIX_TEMPLATES,
    get_nix_template,
)

# ── L1: Domain ──
from src.core.services.command_gen.domain.errors import (  # noqa: F401
    GenerationError,
    NoApplicationsError,
    NoSourcesError,
    PlatformNotFoundError,
)
from src.core.services.command_gen.domain.source_kind import (  # noqa: F401
    SourceKind,
    classify_source,
)

# ── L2: Resolver ──
from src.core.services.command_gen.resolver.package_selection import (  # noqa: F401
    SelectedPackage,
    select_packages,
)

# ── L3: Orchestration ──
from src.core.services.command_gen.orchestration.generator import (  # noqa: F401
    build_install_result,
    build_uninstall_result,
    generate_install_commands,
    generate_uninstall_commands,
)
