"""CLI entrypoint for url-updater."""

from pathlib import Path

import rich_click as click

from url_updater import __version__
from url_updater.controllers import UpdateCliController, UpdateCommand
from url_updater.logging import configure_logging
from url_updater.updater.base import ConfigurationError

click.rich_click.USE_MARKDOWN = True
UPDATE_CONTROLLER = UpdateCliController()


@click.group()
@click.version_option(version=__version__, prog_name="url-updater")
@click.option("--debug/--no-debug", default=False, help="Log updater start/end at DEBUG level.")
def url_updater(debug: bool) -> None:
    """Tool download URL updater CLI."""

    configure_logging(debug=debug)


@url_updater.command("update")
@click.option(
    "--repository-path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to the URL repository (defaults to URL_UPDATER_REPOSITORY_PATH).",
)
@click.option(
    "--timeout-minutes",
    type=click.IntRange(min=1),
    default=None,
    help="Global time budget; no updater starts after it runs out.",
)
@click.option(
    "--tool",
    default=None,
    help="Only run updaters for this tool (`tool` or `tool/edition`); ignores the time budget.",
)
@click.option(
    "--report-path",
    type=click.Path(path_type=Path),
    default=None,
    help="Write the JSON report to this file.",
)
@click.option(
    "--save/--no-save",
    default=True,
    show_default=True,
    help="Write new versions back to the repository.",
)
def update(
    repository_path: Path | None,
    timeout_minutes: int | None,
    tool: str | None,
    report_path: Path | None,
    save: bool,
) -> None:
    """Update download URLs for all tools, or for one tool with --tool."""

    try:
        lines = UPDATE_CONTROLLER.run_update(
            UpdateCommand(
                repository_path=repository_path,
                timeout_minutes=timeout_minutes,
                tool=tool,
                report_path=report_path,
                save=save,
            ),
        )
    except (ConfigurationError, ValueError) as error:
        raise click.UsageError(str(error)) from error
    _emit_lines(lines)


def _emit_lines(lines: list[str]) -> None:
    for line in lines:
        click.echo(line)


if __name__ == "__main__":  # pragma: no cover
    url_updater()
