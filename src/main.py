"""Menagerie command line entry point."""

import typer

from .config import settings
from .demonstration import run_demonstration
from .domain.exceptions import DomainError
from .logging_config import get_logger, setup_logging

app = typer.Typer(
    name="menagerie",
    help="""Menagerie - object-oriented concepts demonstrated with animals

    Running without arguments prints the full demonstration:
    abstraction, encapsulation, polymorphism and composition.
    """,
    add_completion=False,
    rich_markup_mode="rich",
)


@app.command()
def demo(
    log_level: str | None = typer.Option(
        None, "--log-level", help="Override the configured log level"
    ),
    title: str | None = typer.Option(
        None, "--title", help="Override the banner title"
    ),
    version: bool = typer.Option(
        False, "--version", help="Show the version and exit"
    ),
) -> None:
    """Print the animal demonstration to stdout."""
    if version:
        typer.echo(f"{settings.app_name} {settings.version}")
        raise typer.Exit()

    setup_logging(log_level)
    logger = get_logger(__name__)

    config = settings.model_copy(update={"title": title}) if title else settings

    logger.debug("Demonstration started", title=config.title)
    try:
        lines = run_demonstration(config, echo=typer.echo)
    except DomainError as e:
        logger.error("Demonstration failed", error=str(e))
        raise typer.Exit(code=1) from e
    logger.debug("Demonstration finished", lines=lines)


def main():
    """Main entry point for the menagerie console script."""
    app()


if __name__ == "__main__":
    main()
