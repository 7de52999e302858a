"""CLI entry point for gql-doc-catalog."""

import json
import logging
from pathlib import Path

import click

from gql_doc_catalog.errors import MalformedDocument, SettingsError
from gql_doc_catalog.parser.base import Catalog
from gql_doc_catalog.parser.catalog import parse_document
from gql_doc_catalog.search import SearchScope, search
from gql_doc_catalog.settings import load_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _suggest(catalog: Catalog, name: str, kind: str) -> list[str]:
    """Names of the given kind that contain *name*, case-insensitively."""
    pools = {"query": catalog.queries, "mutation": catalog.mutations, "type": catalog.types}
    needle = name.lower()
    return [key for key in pools[kind] if needle in key.lower()]


def _load_catalog(ctx: click.Context, doc_path: Path) -> Catalog:
    """Parse a downloaded reference page with the group's settings."""
    try:
        settings = load_settings(ctx.obj["settings_path"])
        return parse_document(doc_path.read_bytes(), settings)
    except (MalformedDocument, SettingsError) as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("--settings", "settings_path", default=None, envvar="GQL_DOC_CATALOG_SETTINGS", type=click.Path(exists=True, dir_okay=False, path_type=Path), help="YAML settings file.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, settings_path: Path | None, verbose: bool):
    """gql-doc-catalog — turn a GraphQL API reference page into a searchable catalog."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)
    ctx.ensure_object(dict)
    ctx.obj["settings_path"] = settings_path


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write the catalog as JSON to this file.")
@click.pass_context
def parse(ctx: click.Context, doc_path: Path, output: Path | None):
    """Parse DOC_PATH and print summary counts."""
    catalog = _load_catalog(ctx, doc_path)
    summary = catalog.summary
    click.echo(f"Found {summary.total_queries} queries, {summary.total_mutations} mutations, {summary.total_types} types.")

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(catalog.model_dump_json(by_alias=True, exclude_none=True, indent=2), encoding="utf-8")
        click.echo(f"Catalog saved to {output}")


@main.command("search")
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("query")
@click.option("--scope", default="all", type=click.Choice([s.value for s in SearchScope]), help="Which part of the catalog to search.")
@click.pass_context
def search_cmd(ctx: click.Context, doc_path: Path, query: str, scope: str):
    """Search DOC_PATH for QUERY (case-insensitive substring)."""
    catalog = _load_catalog(ctx, doc_path)
    matches = search(query, catalog, scope)
    if not matches:
        click.echo(f'No results for "{query}".')
        return
    for match in matches:
        click.echo(f"{match.category}\t{match.name}")


@main.command("list")
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--kind", default="all", type=click.Choice(["all", "queries", "mutations"]), help="Operations to list.")
@click.pass_context
def list_operations(ctx: click.Context, doc_path: Path, kind: str):
    """List queries and mutations found in DOC_PATH."""
    catalog = _load_catalog(ctx, doc_path)
    groups = []
    if kind in ("all", "queries"):
        groups.append(("Queries", catalog.queries))
    if kind in ("all", "mutations"):
        groups.append(("Mutations", catalog.mutations))

    for title, operations in groups:
        click.echo(f"## {title} ({len(operations)})")
        for name, op in operations.items():
            click.echo(f"- {name}: {op.description or 'No description'}")
        click.echo()


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("name")
@click.option("--kind", required=True, type=click.Choice(["query", "mutation", "type"]), help="Record category.")
@click.pass_context
def show(ctx: click.Context, doc_path: Path, name: str, kind: str):
    """Print the record NAME from DOC_PATH as JSON."""
    catalog = _load_catalog(ctx, doc_path)
    record = catalog.get_type(name) if kind == "type" else catalog.get_operation(name, kind)
    if record is None:
        message = f'{kind.capitalize()} "{name}" not found.'
        suggestions = _suggest(catalog, name, kind)
        if suggestions:
            message += f" Did you mean: {', '.join(suggestions[:5])}?"
        raise click.ClickException(message)
    click.echo(record.model_dump_json(by_alias=True, exclude_none=True, indent=2))


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def endpoints(ctx: click.Context, doc_path: Path):
    """Print the region -> endpoint URL map."""
    catalog = _load_catalog(ctx, doc_path)
    click.echo(json.dumps(dict(catalog.endpoints), indent=2))
