"""
Linite — CLI entrypoint.

Usage:
    python -m src.main --help
    python -m src.main platforms
    python -m src.main generate install ubuntu firefox git vlc
    python -m src.main generate install nixos firefox --nix-method nix-env
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from src.core.models.catalog import Platform
from src.core.observability.logging_config import setup_logging

from src import __version__


@click.group()
@click.version_option(version=__version__, prog_name="linite")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--catalog",
    "-c",
    "catalog_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to catalog.yml (default: $LINITE_CATALOG, auto-detect, or bundled).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    catalog_path: str | None,
) -> None:
    """Linite — generate install commands for many apps at once."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["catalog_path"] = Path(catalog_path) if catalog_path else None

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = None  # LINITE_LOG_LEVEL or WARNING

    setup_logging(level=level, quiet_third_party=not debug)


def _default_slug(platform: Platform) -> str | None:
    default = platform.default_source()
    return default.slug if default else None


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def platforms(ctx: click.Context, as_json: bool) -> None:
    """List platforms and the package sources each supports."""
    from src.ui.cli.generate import load_catalog_or_exit

    store = load_catalog_or_exit(ctx)

    if as_json:
        data = [
            {
                "slug": p.slug,
                "name": p.name,
                "family": p.family,
                "default": _default_slug(p),
                "sources": [
                    {"slug": ps.slug, "priority": ps.priority, "default": ps.is_default}
                    for ps in p.sources
                ],
            }
            for p in store.platforms
        ]
        click.echo(json.dumps(data, indent=2))
        return

    click.secho("🖥️  Platforms:", fg="cyan", bold=True)
    for p in store.platforms:
        click.echo(f"   {p.slug:<12} {p.name}  ({p.family}, default: {_default_slug(p) or 'none'})")
        for ps in sorted(p.sources, key=lambda s: s.priority, reverse=True):
            marker = " ★" if ps.is_default else ""
            click.echo(f"      {ps.slug:<10} priority {ps.priority}{marker}")
    click.echo()


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def apps(ctx: click.Context, as_json: bool) -> None:
    """List catalog applications and their package sources."""
    from src.ui.cli.generate import load_catalog_or_exit

    store = load_catalog_or_exit(ctx)

    if as_json:
        click.echo(json.dumps(
            [app.model_dump(include={"id", "name"}) | {
                "sources": [pkg.source for pkg in app.available_packages()],
            } for app in store.applications],
            indent=2,
        ))
        return

    click.secho("📦 Applications:", fg="cyan", bold=True)
    for app in store.applications:
        sources = ", ".join(pkg.source for pkg in app.available_packages()) or "none"
        click.echo(f"   {app.id:<14} {app.name:<24} {sources}")
    click.echo()


@cli.command()
@click.option("--host", default="127.0.0.1", help="Bind address.")
@click.option("--port", "-p", default=8000, type=int, help="Port number.")
@click.pass_context
def web(ctx: click.Context, host: str, port: int) -> None:
    """Serve the generation API over HTTP."""
    from src.core.config.loader import ConfigError, resolve_catalog_path
    from src.ui.web.server import create_app, run_server

    catalog_path = resolve_catalog_path(ctx.obj.get("catalog_path"))
    try:
        app = create_app(catalog_path=catalog_path)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    debug = ctx.obj.get("debug", False)

    click.echo()
    click.secho("⚡ Linite — Generation API", bold=True)
    click.echo(f"   Endpoint: http://{host}:{port}/api/generate")
    click.echo(f"   Catalog:  {catalog_path}")
    if debug:
        click.secho("   Logging: DEBUG (all output)", fg="yellow")
    click.echo()

    run_server(app, host=host, port=port, debug=debug)


# ── Register sub-command groups from src/ui/cli/ ──────────────────

from src.ui.cli.generate import generate

cli.add_command(generate)


if __name__ == "__main__":
    cli()
