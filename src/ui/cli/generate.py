"""
CLI commands for install/uninstall command generation.

Thin wrappers over ``src.core.services.command_gen``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from src.core.services.catalog_store import CatalogStore


def load_catalog_or_exit(ctx: click.Context) -> CatalogStore:
    """Load the catalog named on the command line, or exit with an error."""
    from src.core.config.loader import ConfigError, load_catalog

    try:
        return load_catalog(ctx.obj.get("catalog_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)


def _fail(message: str) -> None:
    click.secho(f"❌ {message}", fg="red")
    sys.exit(1)


_NIX_METHODS = click.Choice(["nix-shell", "nix-env", "nix-flakes"])


@click.group()
def generate() -> None:
    """Generate — install commands, uninstall commands, install scripts."""


# ── Install ─────────────────────────────────────────────────────


@generate.command()
@click.argument("platform")
@click.argument("app_ids", nargs=-1, required=True)
@click.option("--prefer", "preferred", default=None, help="Preferred source slug (e.g. flatpak).")
@click.option("--nix-method", default=None, type=_NIX_METHODS, help="Nix installer variant.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def install(
    ctx: click.Context,
    platform: str,
    app_ids: tuple[str, ...],
    preferred: str | None,
    nix_method: str | None,
    as_json: bool,
) -> None:
    """Print install commands for APP_IDS on PLATFORM."""
    from src.core.models.generation import GenerationRequest
    from src.core.services.command_gen import GenerationError, generate_install_commands

    store = load_catalog_or_exit(ctx)
    try:
        request = GenerationRequest(
            platform_slug=platform,
            application_ids=list(app_ids),
            preferred_source_slug=preferred,
            nix_installer_variant=nix_method,
        )
        result = generate_install_commands(request, store)
    except (GenerationError, ValidationError) as e:
        _fail(str(e))
        return

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    if result.setup_commands:
        click.secho("🔧 Setup (run once):", fg="cyan", bold=True)
        for cmd in result.setup_commands:
            click.echo(f"   {cmd}")
        click.echo()

    if result.commands:
        click.secho("📦 Install:", fg="cyan", bold=True)
        for cmd in result.commands:
            click.echo(f"   {cmd}")
        click.echo()

    if ctx.obj.get("verbose") and result.breakdown:
        click.secho("📋 Breakdown:", fg="cyan", bold=True)
        for entry in result.breakdown:
            click.echo(f"   {entry.source:<16} {', '.join(entry.packages)}")
        click.echo()

    for warning in result.warnings:
        click.secho(f"⚠️  {warning}", fg="yellow")

    if result.is_empty:
        click.secho("Nothing to install on this platform.", fg="yellow")


# ── Uninstall ───────────────────────────────────────────────────


@generate.command()
@click.argument("platform")
@click.argument("app_ids", nargs=-1, required=True)
@click.option("--prefer", "preferred", default=None, help="Preferred source slug.")
@click.option("--nix-method", default=None, type=_NIX_METHODS, help="Nix installer variant.")
@click.option("--deps", "include_deps", is_flag=True, help="Also remove orphaned dependencies.")
@click.option("--cleanup-setup", is_flag=True, help="Also undo repository setup steps.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def uninstall(
    ctx: click.Context,
    platform: str,
    app_ids: tuple[str, ...],
    preferred: str | None,
    nix_method: str | None,
    include_deps: bool,
    cleanup_setup: bool,
    as_json: bool,
) -> None:
    """Print uninstall commands for APP_IDS on PLATFORM."""
    from src.core.models.generation import UninstallRequest
    from src.core.services.command_gen import GenerationError, generate_uninstall_commands

    store = load_catalog_or_exit(ctx)
    try:
        request = UninstallRequest(
            platform_slug=platform,
            application_ids=list(app_ids),
            preferred_source_slug=preferred,
            nix_installer_variant=nix_method,
            include_dependency_cleanup=include_deps,
            include_setup_cleanup=cleanup_setup,
        )
        result = generate_uninstall_commands(request, store)
    except (GenerationError, ValidationError) as e:
        _fail(str(e))
        return

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    sections = (
        ("🧹 Cleanup:", result.cleanup_commands),
        ("🗑️  Uninstall:", result.commands),
        ("🧹 Dependency cleanup:", result.dependency_cleanup_commands),
    )
    for title, commands in sections:
        if not commands:
            continue
        click.secho(title, fg="cyan", bold=True)
        for cmd in commands:
            click.echo(f"   {cmd}")
        click.echo()

    for step in result.manual_steps:
        click.secho(f"✋ {step.app_name}: {step.instructions}", fg="magenta")

    for warning in result.warnings:
        click.secho(f"⚠️  {warning}", fg="yellow")


# ── Script ──────────────────────────────────────────────────────


@generate.command()
@click.argument("platform")
@click.argument("app_ids", nargs=-1, required=True)
@click.option("--prefer", "preferred", default=None, help="Preferred source slug.")
@click.option("--nix-method", default=None, type=_NIX_METHODS, help="Nix installer variant.")
@click.option(
    "--output", "-o", "output_dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Write the script into this directory instead of stdout.",
)
@click.pass_context
def script(
    ctx: click.Context,
    platform: str,
    app_ids: tuple[str, ...],
    preferred: str | None,
    nix_method: str | None,
    output_dir: str | None,
) -> None:
    """Render an install script for APP_IDS on PLATFORM."""
    from src.core.models.generation import GenerationRequest
    from src.core.services.command_gen import GenerationError, generate_install_commands
    from src.core.services.install_script import render_install_script

    store = load_catalog_or_exit(ctx)
    try:
        request = GenerationRequest(
            platform_slug=platform,
            application_ids=list(app_ids),
            preferred_source_slug=preferred,
            nix_installer_variant=nix_method,
        )
        result = generate_install_commands(request, store)
    except (GenerationError, ValidationError) as e:
        _fail(str(e))
        return

    rendered = render_install_script(platform, result)

    if output_dir is None:
        click.echo(rendered.content, nl=False)
    else:
        target = Path(output_dir) / rendered.filename
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(rendered.content, encoding="utf-8")
        click.secho(f"✅ Wrote {target}", fg="green")

    for warning in result.warnings:
        click.secho(f"⚠️  {warning}", fg="yellow", err=True)
