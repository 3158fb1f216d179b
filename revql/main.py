"""CLI entry point for revql."""

from __future__ import annotations

import sys

import click
from dotenv import load_dotenv
from rich.markup import escape

from revql import __version__
from revql.console import console, err_console

load_dotenv()


@click.command(context_settings={"auto_envvar_prefix": "REVQL"})
@click.version_option(version=__version__, prog_name="revql")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.argument("search")
@click.option(
    "-c", "--containing", is_flag=True, default=False,
    help="Match names containing SEARCH instead of equal to it",
)
@click.option("-t", "--type", "type_only", is_flag=True, default=False, help="Search type names only")
@click.option("-f", "--field", "field_only", is_flag=True, default=False, help="Search field names only")
@click.option(
    "--show-relay", is_flag=True, default=False,
    help="Traverse Relay connection types (edges, node, pageInfo) instead of pruning them",
)
@click.option(
    "--max-depth", type=click.IntRange(min=1), default=None,
    help="Only report paths of at most this many steps",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print matches as JSON")
def cli(
    file: str,
    search: str,
    containing: bool,
    type_only: bool,
    field_only: bool,
    show_relay: bool,
    max_depth: int | None,
    as_json: bool,
) -> None:
    """Find the Query and Mutation fields whose responses can reach SEARCH.

    FILE is the JSON result of a GraphQL introspection query. SEARCH is a
    type or field name (case-sensitive).

    \b
    Examples:
      revql schema.json User
      revql schema.json email --field --containing
      revql schema.json User --type --show-relay
    """
    from revql.schema.catalog import TypeCatalog
    from revql.schema.errors import RevqlError
    from revql.schema.loader import load_document
    from revql.search.engine import search as run_search
    from revql.search.options import SearchOptions
    from revql.search.render import render_json, render_match

    if not search:
        raise click.BadParameter("must not be empty", param_hint="SEARCH")
    if type_only and field_only:
        raise click.UsageError("--type and --field are mutually exclusive")

    options = SearchOptions.from_flags(
        search,
        containing=containing,
        type_only=type_only,
        field_only=field_only,
        show_relay=show_relay,
        max_depth=max_depth,
    )

    try:
        document = load_document(file)
        if document.data is None:
            err_console.print("[yellow]Empty schema[/yellow]")
            return
        catalog = TypeCatalog.from_schema(document.data.schema_)
        if not as_json:
            roots = ", ".join(root.name for root in catalog.roots())
            err_console.print(f"[bold]Loaded schema:[/bold] {len(catalog)} types (roots: {roots})")
        matches = run_search(catalog, options)
    except RevqlError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    if as_json:
        console.print_json(render_json(matches))
        return

    for match in matches:
        console.print(render_match(match), soft_wrap=True)

    if matches:
        err_console.print(f"[green]{len(matches)} match(es)[/green]")
    else:
        err_console.print(f"[yellow]No matches for '{escape(search)}'[/yellow]")


if __name__ == "__main__":
    cli()
