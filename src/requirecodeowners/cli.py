"""requirecodeownersのコマンドラインインターフェース。"""

import sys
from pathlib import Path

import click
import structlog

from requirecodeowners.config import Settings
from requirecodeowners.loaders.codeowners import load_ruleset
from requirecodeowners.loaders.config import load_config
from requirecodeowners.logging_config import configure_logging
from requirecodeowners.models.errors import ConfigError, RequireCodeownersError
from requirecodeowners.reporting.console import SUCCESS_MESSAGE, render_console
from requirecodeowners.reporting.markdown import render_markdown
from requirecodeowners.validators.directories import DirectoryValidator


@click.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="path to config file (default: .requirecodeowners.yml)",
)
@click.option(
    "--codeowners-path",
    type=click.Path(path_type=Path),
    default=None,
    help="path to CODEOWNERS file (auto-detected if not specified)",
)
@click.option(
    "--root",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="repository root that directory paths are relative to (default: current directory)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="log level for diagnostic output on stderr",
)
def main(
    config_path: Path | None,
    codeowners_path: Path | None,
    root: Path | None,
    log_level: str | None,
) -> None:
    """Check that configured directories are covered by CODEOWNERS rules."""
    overrides = {
        "config_path": config_path,
        "codeowners_path": codeowners_path,
        "root": root,
        "log_level": log_level,
    }
    settings = Settings(**{k: v for k, v in overrides.items() if v is not None})
    configure_logging(settings.log_level)
    logger = structlog.get_logger(__name__)

    resolved_config = settings.resolved_config_path()
    try:
        config = load_config(resolved_config)
        if not config.directories:
            raise ConfigError("no directories configured")
        ruleset = load_ruleset(settings.codeowners_path, settings.root)
    except RequireCodeownersError as e:
        logger.debug("startup_failed", error=str(e))
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    validator = DirectoryValidator(ruleset, root=settings.root, config_name=resolved_config.name)
    errors = validator.validate(config.directories)
    if errors:
        click.echo(render_console(errors), err=True)
        click.echo(render_markdown(errors))
        sys.exit(1)

    click.echo(SUCCESS_MESSAGE)
