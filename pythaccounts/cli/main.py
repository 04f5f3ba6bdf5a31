"""Main entry point for the pythaccounts command line interface."""

from __future__ import annotations

from pathlib import Path

import typer

from pythaccounts.core.config.settings import ConfigManager, load_config_from_env
from pythaccounts.core.exceptions.base import ConfigurationError
from pythaccounts.core.logging import configure_logging

from .constants import VALIDATION_EXIT_CODE
from .decode import register as register_decode_commands
from .formatters import create_formatter
from .utils import emit_error


def create_app() -> typer.Typer:
    """Create a Typer application instance for pythaccounts."""

    app = typer.Typer(add_completion=False, help="Decode price-oracle mapping, product and price accounts")

    @app.callback()
    def main(
        ctx: typer.Context,
        format: str = typer.Option(
            "table",
            "--format",
            "-f",
            help="Output format (table or jsonl).",
            show_default=True,
        ),
        output: Path | None = typer.Option(
            None,
            "--output",
            "-o",
            help="Write output to a file instead of stdout.",
        ),
        config_path: Path | None = typer.Option(
            None,
            "--config",
            help="TOML configuration file (defaults to ~/.pythaccounts/config.toml).",
        ),
        log_level: str | None = typer.Option(
            None,
            "--log-level",
            help="Logging level, overriding the configuration file.",
        ),
        no_color: bool = typer.Option(
            False,
            "--no-color",
            help="Disable colorized output for table format.",
        ),
    ) -> None:
        ctx.ensure_object(dict)
        normalized_format = format.strip().lower()
        try:
            create_formatter(normalized_format, no_color=no_color)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--format") from exc

        try:
            manager = ConfigManager(config_path)
            manager.update_config(**load_config_from_env())
        except ConfigurationError as exc:
            emit_error(exc.message, exc.error_code, details=exc.details)
            raise typer.Exit(code=VALIDATION_EXIT_CODE) from exc
        config = manager.get_config()

        level = (log_level or config.logging.level).upper()
        configure_logging(level, file_output=bool(config.logging.file), file_path=config.logging.file)

        ctx.obj.update(
            {
                "format": normalized_format,
                "output_path": output,
                "no_color": no_color,
                "decoder": config.decoder,
            }
        )

    register_decode_commands(app)
    return app


app = create_app()
