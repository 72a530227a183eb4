"""CLI entry point for Schema Bridge."""

import json
import sys
from pathlib import Path
from typing import IO, Any, Dict, Optional

import click
from pydantic import ValidationError

from .config import Config
from .exceptions import SchemaConversionError
from .schema_gen.schema_converter_service import SchemaConverterService
from .utils.log_setup import configure_logging


@click.group()
@click.option(
    "--config-file", "-c",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    help="Path to a JSON configuration file.",
    envvar="SCHEMA_BRIDGE_CONFIG_FILE"
)
@click.option(
    "--log-level", "-l",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None, # Falls back to the Config value
    help="Override the logging level (e.g., DEBUG, INFO).",
)
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"], case_sensitive=False),
    default=None,
    help="Override logging format.",
)
@click.pass_context
def cli(ctx: click.Context, config_file: Optional[str], log_level: Optional[str], log_format: Optional[str]) -> None:
    """Schema Bridge - converts validation schema descriptors to OpenAPI Schema Objects."""
    try:
        if config_file:
            cfg = Config.from_file(Path(config_file))
        else:
            # Environment variables (and .env file if present)
            cfg = Config()
    except (OSError, ValueError) as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(1)

    if log_level:
        cfg.logging.level = log_level.upper()
    if log_format:
        cfg.logging.format = log_format.lower()

    configure_logging(cfg.logging)
    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg


@cli.command()
@click.argument("input_file", type=click.File("r"), default="-")
@click.option(
    "--output-file", "-o",
    type=click.Path(dir_okay=False, writable=True, resolve_path=True),
    help="Output file path for the generated schema (JSON). Defaults to stdout."
)
@click.option("--request-body", is_flag=True, help="Wrap the schema in an OpenAPI Request Body Object.")
@click.option("--content-type", default="application/json", show_default=True, help="Media type used with --request-body.")
@click.option("--explicit-defaults", is_flag=True, help="Keep falsy defaults such as 0, '' and false.")
@click.pass_context
def convert(
    ctx: click.Context,
    input_file: IO[str],
    output_file: Optional[str],
    request_body: bool,
    content_type: str,
    explicit_defaults: bool,
) -> None:
    """Converts a JSON schema descriptor tree (file or '-' for stdin) to OpenAPI."""
    config: Config = ctx.obj["config"]
    if explicit_defaults:
        config.conversion.explicit_default_presence = True

    service = SchemaConverterService(app_config=config)
    try:
        descriptor = json.load(input_file)
        result: Dict[str, Any]
        if request_body:
            result = service.to_request_body(descriptor, content_type=content_type)
        else:
            result = service.convert_to_dict(descriptor)
    except json.JSONDecodeError as e:
        click.echo(f"Input is not valid JSON: {e}", err=True)
        sys.exit(1)
    except (SchemaConversionError, ValidationError, TypeError) as e:
        click.echo(f"Conversion failed: {e}", err=True)
        sys.exit(1)

    rendered = json.dumps(result, indent=2)
    if output_file:
        try:
            with open(output_file, "w") as f:
                f.write(rendered + "\n")
        except OSError as e:
            click.echo(f"Error writing output file {output_file}: {e}", err=True)
            sys.exit(1)
        click.echo(f"OpenAPI schema written to {output_file}", err=True)
    else:
        click.echo(rendered)


@cli.command()
def version() -> None:
    """Show version information."""
    from . import __version__
    click.echo(f"Schema Bridge v{__version__}")


@cli.command()
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Show current configuration."""
    config: Config = ctx.obj["config"]
    click.echo(json.dumps(config.model_dump(), indent=2))


if __name__ == "__main__":
    cli()
