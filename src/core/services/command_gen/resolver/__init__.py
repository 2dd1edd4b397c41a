"""
L2 Resolver — ``__init__.py`` re-exports all resolver functions.

These functions turn catalog data + L1 domain rules into concrete
package selections and shell command strings.
"""

from src.core.services.command_gen.resolver.command_synthesis import (  # noqa: F401
    InstallTemplates,
    build_install_command,
    build_script_command,
    collect_setup_commands,
    group_by_source,
    resolve_install_templates,
    synthesize_script_group,
)
from src.core.services.command_gen.resolver.package_selection import (  # noqa: F401
    SelectedPackage,
    calculate_priority,
    eligible_packages,
    select_best_package,
    select_packages,
)
from src.core.services.command_gen.resolver.uninstall_synthesis import (  # noqa: F401
    NIX_SHELL_EPHEMERAL_WARNING,
    RemovalTemplates,
    build_dependency_cleanup,
    build_remove_command,
    collect_cleanup_commands,
    resolve_removal_templates,
    synthesize_script_removal,
)
