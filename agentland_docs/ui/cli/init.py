"""
CLI command for template initialization.

Thin wrapper over ``agentland_docs.core.use_cases.init``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from agentland_docs.core.models.template import CopyNotice

_NEXT_STEPS = (
    "Review and customize CLAUDE.md for your project",
    "Fill in docs/vision.md with your system intent",
    "Update implementation-plan.md with your phases",
)


def _print_notice(notice: CopyNotice) -> None:
    click.echo(notice.render())


def _confirm() -> bool:
    click.echo()
    if not click.confirm("Configure your documentation now?", default=True):
        return False
    click.echo()
    click.secho("Answer a few questions (press Enter to skip any of them):", fg="cyan")
    return True


def _ask(prompt: str) -> str:
    return click.prompt(f"  {prompt}", default="", show_default=False)


def _print_next_steps() -> None:
    click.echo()
    click.echo("Next steps:")
    for i, step in enumerate(_NEXT_STEPS, 1):
        click.echo(f"  {i}. {step}")
    click.echo()


@click.command("init")
@click.option("--force", is_flag=True, help="Overwrite existing files without prompting.")
@click.option(
    "--no-configure",
    is_flag=True,
    help="Skip the interactive configuration step.",
)
@click.option(
    "--json-output",
    "--json",
    "as_json",
    is_flag=True,
    help="Output a JSON summary (implies --no-configure).",
)
def init(force: bool, no_configure: bool, as_json: bool) -> None:
    """Copy documentation templates to the current directory."""
    from agentland_docs.core.config.loader import ConfigError
    from agentland_docs.core.services.template_copy import SourceMissingError
    from agentland_docs.core.use_cases.init import run_init

    interactive = not (no_configure or as_json)

    if not as_json:
        click.secho("\nInitializing spec-driven documentation...\n", fg="cyan", bold=True)

    try:
        result = run_init(
            Path.cwd(),
            force=force,
            configure=interactive,
            confirm=_confirm,
            ask=_ask,
            on_notice=None if as_json else _print_notice,
        )
    except (SourceMissingError, ConfigError, OSError) as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    if result.configure is not None:
        click.echo()
        if result.configure.changed:
            for path in result.configure.documents_updated:
                click.secho(f"  Updated: {path}", fg="green")
        else:
            click.echo("  No files were changed.")

    click.echo()
    click.secho(
        "Done! Documentation templates have been added to your project.",
        fg="green",
        bold=True,
    )

    if not result.configured:
        _print_next_steps()
    else:
        click.echo()
