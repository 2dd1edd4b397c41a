"""
L1 Domain — ``__init__.py`` re-exports all pure domain functions.

These functions have NO subprocess calls, NO filesystem access,
NO network calls. Pure input→output.
"""

from src.core.services.command_gen.domain.errors import (  # noqa: F401
    GenerationError,
    NoApplicationsError,
    NoSourcesError,
    PlatformNotFoundError,
)
from src.core.services.command_gen.domain.platform_rules import (  # noqa: F401
    OsToken,
    detect_os,
    resolve_family_command,
    should_use_sudo,
    with_sudo,
)
from src.core.services.command_gen.domain.source_kind import (  # noqa: F401
    SourceKind,
    classify_source,
)
