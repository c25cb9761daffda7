"""CLI commands for rfc-uuid."""

import json
import logging
import sys
import tomllib
from pathlib import Path

import click
from pydantic import ValidationError

from rfc_uuid import (
    UUID,
    UUIDDecoder,
    UUIDError,
    UUIDGenerator,
    UUIDValidator,
    compare as compare_uuids,
    equals as equals_uuids,
)
from rfc_uuid.config import Config

logger = logging.getLogger(__name__)

FORMATS = click.Choice(["string", "hex"])


def _load_config(path: Path | None) -> Config:
    if path is not None:
        return Config.from_toml(path)
    try:
        return Config.find_and_load()
    except FileNotFoundError:
        return Config()


def _render(uuid: UUID, fmt: str, upper: bool) -> str:
    text = uuid.to_hex() if fmt == "hex" else uuid.to_string()
    return text.upper() if upper else text


def _fail(error: Exception) -> None:
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(package_name="rfc-uuid")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to rfc-uuid.toml (default: search from current directory)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """rfc-uuid - parse, validate and format RFC 4122 UUIDs."""
    try:
        config = _load_config(config_path)
    except (tomllib.TOMLDecodeError, ValidationError) as e:
        _fail(e)
        return
    logging.basicConfig(level=config.logging.level)
    logger.debug(f"Loaded configuration: {config}")
    ctx.obj = config


@cli.command()
@click.option("--count", type=int, default=1, help="Number of UUIDs to generate (default: 1)")
@click.option("--format", "fmt", type=FORMATS, help="Output form (default from config)")
@click.option("--upper", is_flag=True, help="Uppercase hex digits (default from config)")
@click.pass_obj
def generate(config: Config, count: int, fmt: str | None, upper: bool) -> None:
    """Generate random version 4 UUID(s)."""
    fmt = fmt or config.output.format
    upper = upper or config.output.uppercase

    try:
        uuids = UUIDGenerator().generate_batch(count)
    except UUIDError as e:
        _fail(e)
        return

    for uuid in uuids:
        click.echo(_render(uuid, fmt, upper))


@cli.command()
@click.argument("uuid")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def decode(uuid: str, output_json: bool) -> None:
    """Decode UUID into version and variant."""
    try:
        decoded = UUIDDecoder().decode(uuid)
    except UUIDError as e:
        _fail(e)
        return

    if output_json:
        click.echo(json.dumps({"uuid": decoded.raw_uuid, **decoded.components}, indent=2))
    else:
        click.echo(f"UUID: {decoded.raw_uuid}")
        click.echo(f"  hex:     {decoded['hex']}")
        click.echo(f"  version: {decoded['version']}")
        click.echo(f"  variant: {decoded['variant']}")
        click.echo(f"  valid:   {decoded['valid']}")


@cli.command()
@click.argument("uuid")
@click.option("--quiet", "-q", is_flag=True, help="Only output result (0=valid, 1=invalid)")
@click.option("--loose", is_flag=True, help="Accept non-RFC 4122 version/variant with a warning")
@click.pass_obj
def validate(config: Config, uuid: str, quiet: bool, loose: bool) -> None:
    """Validate UUID format."""
    strict = config.validation.strict_mode and not loose
    result = UUIDValidator(strict=strict).validate(uuid)

    if quiet:
        sys.exit(0 if result.valid else 1)

    if result.valid:
        click.echo(f"✓ Valid UUID: {uuid}")
        for warning in result.warnings or []:
            click.echo(f"  warning: {warning}", err=True)
        sys.exit(0)
    else:
        click.echo(f"✗ {result.error}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("first")
@click.argument("second")
def compare(first: str, second: str) -> None:
    """Compare two UUIDs in byte order (prints -1, 0 or 1)."""
    try:
        click.echo(compare_uuids(first, second))
    except UUIDError as e:
        _fail(e)


@cli.command()
@click.argument("uuids", nargs=-1, required=True)
def equals(uuids: tuple[str, ...]) -> None:
    """Check that all given UUIDs are equal (exit 0 if equal, 1 if not)."""
    try:
        result = equals_uuids(*uuids)
    except UUIDError as e:
        _fail(e)
        return

    click.echo("true" if result else "false")
    sys.exit(0 if result else 1)


@cli.command()
@click.argument("uuid")
@click.option("--format", "fmt", type=FORMATS, help="Output form (default from config)")
@click.option("--upper", is_flag=True, help="Uppercase hex digits (default from config)")
@click.pass_obj
def convert(config: Config, uuid: str, fmt: str | None, upper: bool) -> None:
    """Convert a UUID between hyphenated and hex forms."""
    fmt = fmt or config.output.format
    upper = upper or config.output.uppercase

    try:
        click.echo(_render(UUID(uuid), fmt, upper))
    except UUIDError as e:
        _fail(e)


if __name__ == "__main__":
    cli()
