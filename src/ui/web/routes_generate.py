"""
Generation routes — install/uninstall command endpoints.

Blueprint: generate_bp
Prefix: /api

Thin HTTP wrappers over ``src.core.services.command_gen``.

Endpoints:
    GET  /platforms          — platforms and their sources
    POST /generate           — install commands
    POST /generate/script    — downloadable install script
    POST /uninstall          — uninstall commands
    POST /uninstall/script   — downloadable uninstall script
"""

from __future__ import annotations

import logging

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from src.core.models.generation import GenerationRequest, UninstallRequest
from src.core.services.catalog_store import CatalogStore
from src.core.services.command_gen import (
    GenerationError,
    generate_install_commands,
    generate_uninstall_commands,
)
from src.core.services.install_script import render_install_script, render_uninstall_script

logger = logging.getLogger(__name__)

generate_bp = Blueprint("generate", __name__)


def _catalog() -> CatalogStore:
    return current_app.config["CATALOG"]


def _validation_message(error: ValidationError) -> str:
    """First validation problem as ``field: message``."""
    first = error.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ())) or "body"
    return f"{field}: {first.get('msg', 'invalid value')}"


# ── Reference ───────────────────────────────────────────────────────


@generate_bp.route("/platforms")
def list_platforms():  # type: ignore[no-untyped-def]
    """Platforms with their supported sources."""
    return jsonify([
        {
            "slug": p.slug,
            "name": p.name,
            "family": p.family,
            "defaultSource": (p.default_source().slug if p.default_source() else None),
            "sources": [
                {
                    "slug": ps.slug,
                    "name": ps.source.name,
                    "priority": ps.priority,
                    "isDefault": ps.is_default,
                }
                for ps in p.sources
            ],
        }
        for p in _catalog().platforms
    ])


# ── Generate ────────────────────────────────────────────────────────


@generate_bp.route("/generate", methods=["POST"])
def generate_install():  # type: ignore[no-untyped-def]
    """Install commands for the selected apps."""
    data = request.get_json(silent=True) or {}

    try:
        req = GenerationRequest.model_validate(data)
        result = generate_install_commands(req, _catalog())
    except ValidationError as e:
        return jsonify({"error": _validation_message(e)}), 400
    except GenerationError as e:
        return jsonify({"error": str(e)}), 400

    return jsonify(result.to_dict())


@generate_bp.route("/generate/script", methods=["POST"])
def generate_script():  # type: ignore[no-untyped-def]
    """Install commands rendered as a bash/PowerShell script."""
    data = request.get_json(silent=True) or {}

    try:
        req = GenerationRequest.model_validate(data)
        result = generate_install_commands(req, _catalog())
    except ValidationError as e:
        return jsonify({"error": _validation_message(e)}), 400
    except GenerationError as e:
        return jsonify({"error": str(e)}), 400

    rendered = render_install_script(req.platform_slug, result)
    return jsonify(rendered.to_dict() | {"warnings": result.warnings})


@generate_bp.route("/uninstall", methods=["POST"])
def generate_uninstall():  # type: ignore[no-untyped-def]
    """Uninstall commands for the selected apps."""
    data = request.get_json(silent=True) or {}

    try:
        req = UninstallRequest.model_validate(data)
        result = generate_uninstall_commands(req, _catalog())
    except ValidationError as e:
        return jsonify({"error": _validation_message(e)}), 400
    except GenerationError as e:
        return jsonify({"error": str(e)}), 400

    return jsonify(result.to_dict())


@generate_bp.route("/uninstall/script", methods=["POST"])
def generate_uninstall_script():  # type: ignore[no-untyped-def]
    """Uninstall commands rendered as a bash/PowerShell script."""
    data = request.get_json(silent=True) or {}

    try:
        req = UninstallRequest.model_validate(data)
        result = generate_uninstall_commands(req, _catalog())
    except ValidationError as e:
        return jsonify({"error": _validation_message(e)}), 400
    except GenerationError as e:
        return jsonify({"error": str(e)}), 400

    rendered = render_uninstall_script(req.platform_slug, result)
    return jsonify(rendered.to_dict() | {
        "warnings": result.warnings,
        "manualSteps": [step.to_dict() for step in result.manual_steps],
    })
