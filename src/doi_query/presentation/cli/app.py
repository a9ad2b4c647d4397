"""Thin CLI wrapper — Typer commands that delegate to Use Cases.

All registry access goes through the Container (bootstrap.py).
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape

from doi_query.presentation.cli.formatters import (
    console,
    error_message,
    json_panel,
    record_table,
    success_panel,
    url_table,
)

app = typer.Typer(
    name="doi-query",
    help="📚 Resolve DOIs to bibliographic metadata through CrossRef",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for config commands
config_app = typer.Typer(
    name="config",
    help="⚙️  Manage the registry configuration",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

ConfigOption = Annotated[
    Optional[str],
    typer.Option("--config", "-c", help="Path to a JSON configuration file"),
]
ApiKeyOption = Annotated[
    Optional[str],
    typer.Option("--api-key", "-k", help="CrossRef pid, overrides the configured key"),
]


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Resolve DOIs to bibliographic metadata."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# ---------------------------------------------------------------------------
# doi-query fetch
# ---------------------------------------------------------------------------


@app.command()
def fetch(
    doi: Annotated[str, typer.Argument(help="DOI to resolve (bare or URL)")],
    api_key: ApiKeyOption = None,
    config: ConfigOption = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the record as JSON")] = False,
) -> None:
    """Fetch the metadata record for a DOI."""
    from doi_query.bootstrap import Container
    from doi_query.domain.errors import DOIQueryError

    try:
        container = Container(config_path=config, api_key=api_key)
        record = container.resolve_doi().execute(doi)
    except DOIQueryError as exc:
        error_message(f"{type(exc).__name__}: {escape(str(exc))}")
        raise typer.Exit(code=2)

    if as_json:
        typer.echo(record.model_dump_json(indent=2))
    elif not record.is_error:
        record_table(record)

    if record.is_error:
        if not as_json:
            error_message(f"{escape(record.doi or '')}: {escape(record.error)}")
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# doi-query url
# ---------------------------------------------------------------------------


@app.command()
def url(
    doi: Annotated[str, typer.Argument(help="DOI to build URLs for")],
    api_key: ApiKeyOption = None,
    config: ConfigOption = None,
) -> None:
    """Show the registry query URL and resolver link without fetching."""
    from doi_query.application.query_url import build_lookup_url, build_query_url, normalize_doi
    from doi_query.bootstrap import Container
    from doi_query.domain.errors import ConfigurationError

    try:
        cfg = Container(config_path=config, api_key=api_key).config
    except ConfigurationError as exc:
        error_message(escape(str(exc)))
        raise typer.Exit(code=2)

    bare = normalize_doi(doi)
    url_table(build_query_url(bare, cfg), build_lookup_url(bare, cfg))


# ---------------------------------------------------------------------------
# doi-query config show / init / validate
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show(config: ConfigOption = None) -> None:
    """Show the active configuration."""
    from doi_query.config import get_config, load_config
    from doi_query.domain.errors import ConfigurationError

    try:
        cfg = load_config(Path(config)) if config else get_config()
    except ConfigurationError as exc:
        error_message(escape(str(exc)))
        raise typer.Exit(code=1)
    json_panel(cfg.model_dump_json(indent=2))


@config_app.command("init")
def config_init(
    output: Annotated[
        str, typer.Option("--output", "-o", help="Destination file name")
    ] = "doi_config.json",
) -> None:
    """Copy the default configuration to the current directory for editing."""
    from doi_query.config.loader import _DEFAULT_CONFIG_PATH

    dest = Path(output)
    if dest.exists():
        console.print(f"[bold yellow]⚠️  File already exists:[/] {dest}")
        overwrite = typer.confirm("Overwrite it?")
        if not overwrite:
            raise typer.Abort()

    shutil.copy2(_DEFAULT_CONFIG_PATH, dest)
    success_panel(
        f"✅ Configuration copied to: [bold green]{dest}[/]\n\n"
        "Edit this file and use it with [bold]--config[/]:\n"
        f'  doi-query fetch 10.1000/xyz --config "{dest}"',
        title="⚙️  Config Init",
    )


@config_app.command("validate")
def config_validate(
    config_file: Annotated[str, typer.Argument(help="Path to the JSON configuration to validate")],
) -> None:
    """Validate a JSON configuration file."""
    from doi_query.config import load_config
    from doi_query.domain.errors import ConfigurationError

    path = Path(config_file)
    if not path.exists():
        error_message(f"File not found: {path}")
        raise typer.Exit(code=1)

    try:
        cfg = load_config(path)
    except ConfigurationError as e:
        console.print(f"[bold red]❌ Validation error:[/]\n\n{escape(str(e))}")
        raise typer.Exit(code=1)

    success_panel(
        f"✅ Valid configuration\n\n"
        f"  Fetch URL: [cyan]{cfg.fetch_base_url}[/]\n"
        f"  Lookup URL: [cyan]{cfg.lookup_base_url}[/]\n"
        f"  API key: [cyan]{'set' if cfg.api_key else 'not set'}[/]",
        title="✅ Validation",
    )


if __name__ == "__main__":
    app()
