"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from pi_schema_generator.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from pi_schema_generator.generation_run import (
    GenerationError,
    GenerationRequest,
    generate_schemas,
)
from pi_schema_generator.schema_catalog import SCHEMA_TARGETS, select_schema_targets

_CONFIG_FILE_BY_TARGET = {
    "settings": "settings.json",
    "models": "models.json",
    "auth": "auth.json",
}


class CliError(Exception):
    """Custom CLI error."""


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
)
@click.version_option(package_name="pi-schema-generator")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Generate JSON Schema documents for pi coding agent configuration files.

    Without a subcommand, runs `generate` with its defaults.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if ctx.invoked_subcommand is None:
        ctx.invoke(generate)


@cli.command(name="generate")
@click.option(
    "--output-dir",
    "output_dir",
    required=False,
    type=click.Path(file_okay=False, path_type=str),
    help="Directory for the schema documents (overrides the configuration file)",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(dir_okay=False, path_type=str),
    help="Optional YAML generator configuration file",
)
def generate(output_dir: str | None, config_path: str | None) -> None:
    """Write settings, models and auth schema documents."""
    try:
        settings = load_configuration(config_path)
        request = GenerationRequest(
            output_dir=Path(output_dir) if output_dir else settings.output_dir,
            targets=select_schema_targets(settings.documents),
        )
        outcome = generate_schemas(
            request, on_written=lambda path: click.echo(f"Generated: {path}")
        )
    except (ConfigurationError, GenerationError) as exc:
        raise CliError(str(exc)) from exc

    click.echo("")
    click.echo("Done! Add $schema to your config files for IDE validation:")
    for target, path in zip(request.targets, outcome.written_paths):
        config_file = _CONFIG_FILE_BY_TARGET.get(target.name, target.name)
        click.echo(f'  {config_file + ":":<15}"$schema": "./schemas/{path.name}"')


@cli.command(name="list")
def list_schemas() -> None:
    """List the schema documents this tool produces."""
    for target in SCHEMA_TARGETS:
        click.echo(f"{target.name}\t{target.filename}\t{target.schema_id}")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML generator configuration to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML generator configuration listing every setting and its default."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), prog_name="pi-schemas", standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
