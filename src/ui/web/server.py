"""
Web API server — Flask app factory.

Creates and configures the Flask application that exposes the
generation engine over HTTP. The catalog is loaded once at startup
and shared by every request.
"""

from __future__ import annotations

import logging
from pathlib import Path

from flask import Flask

from src.core.config.loader import load_catalog
from src.core.services.catalog_store import CatalogStore

logger = logging.getLogger(__name__)


def create_app(
    catalog_path: Path | None = None,
    catalog: CatalogStore | None = None,
) -> Flask:
    """Create and configure the Flask application.

    Args:
        catalog_path: Path to catalog.yml (ignored when ``catalog`` is given).
        catalog: Pre-built catalog, e.g. from a caller's own database.

    Returns:
        Configured Flask application.

    Raises:
        ConfigError: If the catalog file cannot be loaded.
    """
    app = Flask(__name__)

    if catalog is None:
        catalog = load_catalog(catalog_path)

    app.config["CATALOG"] = catalog
    app.config["CATALOG_PATH"] = str(catalog_path) if catalog_path else None
    app.config["MAX_CONTENT_LENGTH"] = 1024 * 1024  # requests are small JSON bodies

    from src.ui.web.routes_generate import generate_bp

    app.register_blueprint(generate_bp, url_prefix="/api")

    logger.info(
        "Web API app created (%d platforms, %d applications)",
        len(catalog.platforms), len(catalog.applications),
    )
    return app


def run_server(
    app: Flask,
    host: str = "127.0.0.1",
    port: int = 8000,
    debug: bool = False,
) -> None:
    """Run the Flask development server."""
    logger.info("Starting web API on %s:%d", host, port)
    app.run(host=host, port=port, debug=debug, use_reloader=False)
