"""
Catalog store — in-memory Platform and Application lookups.

The generation engine never touches storage. It asks a catalog for
two things, a platform by slug and applications by id, through the
``CatalogLookup`` protocol. ``CatalogStore`` is the in-process
implementation backed by a loaded catalog.yml; callers with their own
database only need to provide the same two methods.
"""

from __future__ import annotations

import logging
from typing import Iterable, Protocol

from src.core.models.catalog import Application, Platform

logger = logging.getLogger(__name__)


class CatalogLookup(Protocol):
    """What the engine needs from its data collaborators."""

    def get_platform(self, slug: str) -> Platform | None: ...

    def get_applications(self, ids: list[str]) -> list[Application]: ...


class CatalogStore:
    """Read-only platform and application catalog held in memory."""

    def __init__(
        self,
        platforms: Iterable[Platform] = (),
        applications: Iterable[Application] = (),
    ) -> None:
        self._platforms: dict[str, Platform] = {p.slug: p for p in platforms}
        self._applications: dict[str, Application] = {a.id: a for a in applications}
        logger.debug(
            "Catalog store: %d platforms, %d applications",
            len(self._platforms), len(self._applications),
        )

    # ── Lookups ─────────────────────────────────────────────────

    def get_platform(self, slug: str) -> Platform | None:
        """Platform by slug, or None."""
        return self._platforms.get(slug)

    def get_applications(self, ids: list[str]) -> list[Application]:
        """Known applications for ``ids``, in request order.

        Unknown ids are skipped; a repeated id is returned once.
        """
        found: list[Application] = []
        seen: set[str] = set()
        for app_id in ids:
            if app_id in seen:
                continue
            seen.add(app_id)
            app = self._applications.get(app_id)
            if app is None:
                logger.debug("Unknown application id: %s", app_id)
                continue
            found.append(app)
        return found

    # ── Listing ─────────────────────────────────────────────────

    @property
    def platforms(self) -> list[Platform]:
        return list(self._platforms.values())

    @property
    def applications(self) -> list[Application]:
        return list(self._applications.values())
