"""
L1 Domain — Hard generation failures.

Raised for caller input errors detected before any synthesis. Soft
failures (one unsatisfiable app) are never exceptions; they become
warnings on the result.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for errors that abort a generation call."""


class PlatformNotFoundError(GenerationError):
    """The platform slug does not resolve to a known platform."""

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__("Distribution not found. Please select a valid Linux distribution.")


class NoSourcesError(GenerationError):
    """The platform supports no package sources."""

    def __init__(self, platform_name: str) -> None:
        self.platform_name = platform_name
        super().__init__(f'No sources configured for distro "{platform_name}"')


class NoApplicationsError(GenerationError):
    """None of the requested application ids are known."""

    def __init__(self, application_ids: list[str]) -> None:
        self.application_ids = list(application_ids)
        super().__init__("No apps found for the provided IDs")
