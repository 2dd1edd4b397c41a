"""
L3 Orchestration — ``__init__.py`` re-exports the generation entry points.
"""

from src.core.services.command_gen.orchestration.generator import (  # noqa: F401
    build_install_result,
    build_uninstall_result,
    generate_install_commands,
    generate_uninstall_commands,
    resolve_inputs,
)
