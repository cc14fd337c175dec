"""Main CLI entry point for the Template Outlet documentation server."""

import asyncio

import click
from rich.markdown import Markdown
from rich.panel import Panel
from rich.text import Text

from template_outlet_mcp.core.errors import DocsServerError
from template_outlet_mcp.core.examples import EXAMPLE_MARKERS
from template_outlet_mcp.core.logging import setup_logging
from template_outlet_mcp.core.search import SectionFilter
from template_outlet_mcp.mcp_server.config import Config
from template_outlet_mcp.mcp_server.tools import DocsTools

from .utils import console, echo_error, echo_info


@click.group(invoke_without_command=True)
@click.option("-v", "--version", is_flag=True, help="Show version information")
@click.pass_context
def cli(ctx, version):
    """Template Outlet docs - search the Alpine.js Template Outlet manual.

    Examples:
        template-outlet-docs serve                          # Run the MCP stdio server
        template-outlet-docs search "recursive rendering"   # Search all sections
        template-outlet-docs search loop -s troubleshooting # Search one section
        template-outlet-docs sections                       # Table of contents
        template-outlet-docs example nested-menu            # Show a worked example
    """
    if version:
        from . import __version__

        console.print(f"Template Outlet MCP v{__version__}")
        ctx.exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        ctx.exit()

    ctx.ensure_object(dict)
    config = Config()
    setup_logging(config.settings.log_level, config.settings.log_file)
    ctx.obj["config"] = config


def _run_tool(coro):
    """Run a tool coroutine, exiting with status 1 on documentation errors."""
    try:
        return asyncio.run(coro)
    except DocsServerError as e:
        echo_error(e.message)
        if e.details:
            for key, value in e.details.items():
                console.print(f"  [dim]{key}:[/dim] {value}")
        raise SystemExit(1)


@cli.command()
def serve():
    """Run the MCP server over stdio."""
    from template_outlet_mcp.mcp_server.main import cli_main

    cli_main()


@cli.command()
@click.argument("query")
@click.option(
    "-s",
    "--section",
    default=SectionFilter.ALL.value,
    type=click.Choice([f.value for f in SectionFilter]),
    help="Limit the search to one section",
)
@click.pass_context
def search(ctx, query, section):
    """Search the documentation for QUERY."""
    tools = DocsTools(ctx.obj["config"])
    results = _run_tool(tools.search_service.search(query, section))

    if not results:
        echo_info(f'No results found for "{query}" in section "{section}"')
        return

    console.print(f'[bold]Search results for "{query}"[/bold] ({len(results)})\n')
    for i, result in enumerate(results, start=1):
        console.print(
            Panel(
                Text(result.snippet),
                title=f"{i}. {result.heading}",
                subtitle=f"relevance {result.relevance}",
                title_align="left",
            )
        )


@cli.command()
@click.pass_context
def sections(ctx):
    """Show the manual's table of contents."""
    tools = DocsTools(ctx.obj["config"])
    console.print(Markdown(_run_tool(tools.list_sections())))


@cli.command()
@click.argument("name", type=click.Choice(list(EXAMPLE_MARKERS)))
@click.pass_context
def example(ctx, name):
    """Show the worked example NAME."""
    tools = DocsTools(ctx.obj["config"])
    console.print(Markdown(_run_tool(tools.get_example(name))))


if __name__ == "__main__":
    cli()
