"""
Domain models — Pydantic types for the generation engine.

All models are re-exported here for convenient access:

    from src.core.models import Platform, Application, GenerationRequest, GenerationResult
"""

from src.core.models.catalog import (
    Application,
    FamilyCommand,
    Package,
    PackageMetadata,
    Platform,
    PlatformSource,
    ScriptUrls,
    Source,
    UninstallMetadata,
)
from src.core.models.generation import (
    GenerationRequest,
    GenerationResult,
    ManualUninstallStep,
    PackageBreakdown,
    UninstallRequest,
    UninstallResult,
)

__all__ = [
    # catalog.py
    "Application",
    "FamilyCommand",
    "Package",
    "PackageMetadata",
    "Platform",
    "PlatformSource",
    "ScriptUrls",
    "Source",
    "UninstallMetadata",
    # generation.py
    "GenerationRequest",
    "GenerationResult",
    "ManualUninstallStep",
    "PackageBreakdown",
    "UninstallRequest",
    "UninstallResult",
]
