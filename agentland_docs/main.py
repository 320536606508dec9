"""
agentland-docs — CLI entrypoint.

Usage:
    agentland-docs --help
    agentland-docs init
    agentland-docs init --force
    python -m agentland_docs.main init --no-configure
"""

from __future__ import annotations

import os

import click

from agentland_docs import __version__
from agentland_docs.core.observability.logging_config import (
    LOG_FILE_ENV,
    resolve_level,
    setup_logging,
)

PROG_NAME = "agentland-docs"

_EXAMPLES = f"""\b
Examples:
  {PROG_NAME} init
  {PROG_NAME} init --force
  {PROG_NAME} init --no-configure
"""


class DocsGroup(click.Group):
    """Command group that reports unknown commands in its own words."""

    def resolve_command(self, ctx: click.Context, args: list[str]):
        name = args[0] if args else ""
        if name and self.get_command(ctx, name) is None:
            raise click.UsageError(
                f"Unknown command: {name}\n"
                f'Run "{PROG_NAME} help" for usage information.',
                ctx,
            )
        return super().resolve_command(ctx, args)


@click.group(
    cls=DocsGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=_EXAMPLES,
)
@click.version_option(version=__version__, prog_name=PROG_NAME)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool, debug: bool) -> None:
    """agentland-docs — documentation templates for spec-driven development."""
    # ── Logging setup (once, at process start) ──────────────────
    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(LOG_FILE_ENV),
    )

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)


@cli.command("help")
@click.pass_context
def help_command(ctx: click.Context) -> None:
    """Show this help message."""
    click.echo(ctx.parent.get_help() if ctx.parent else ctx.get_help())


# ── Register sub-commands from agentland_docs/ui/cli/ ────────────

from agentland_docs.ui.cli.init import init  # noqa: E402

cli.add_command(init)


if __name__ == "__main__":
    cli()
