"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from dataclasses import replace
from pathlib import Path

import click

from pomeloc.code_generation import default_registry
from pomeloc.compilation import (
    CompilationError,
    CompileRequest,
    classify_proto_files,
    execute_compilation,
    request_from_configuration,
)
from pomeloc.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="pomeloc")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Generate typed Pomelo client proxies from JSON protocol descriptions."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command(name="generate")
@click.argument("proto_files", nargs=-1, type=click.Path(path_type=Path))
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to a YAML/JSON compile configuration file",
)
@click.option(
    "--server",
    "server_path",
    required=False,
    type=click.Path(path_type=Path),
    help="Server protocol document (responses and pushed events)",
)
@click.option(
    "--client",
    "client_path",
    required=False,
    type=click.Path(path_type=Path),
    help="Client protocol document (request methods)",
)
@click.option("--target", required=False, help="Generation target id (see `targets`)")
@click.option(
    "--ns",
    "custom_namespace",
    required=False,
    help="Custom namespace wrapped around the generated code; empty for none",
)
@click.option(
    "--output-dir",
    "-o",
    "output_dir",
    required=False,
    type=click.Path(path_type=Path),
    help="Directory for the generated file",
)
@click.option(
    "--file-name",
    "file_name",
    required=False,
    help="Base name of the generated file; defaults to the client document name",
)
def generate_command(  # pylint: disable=too-many-arguments
    proto_files: tuple[Path, ...],
    config_path: str | None,
    server_path: Path | None,
    client_path: Path | None,
    target: str | None,
    custom_namespace: str | None,
    output_dir: Path | None,
    file_name: str | None,
) -> None:
    """Generate the client proxy from serverProtos.json and/or clientProtos.json."""
    try:
        if config_path:
            request = request_from_configuration(load_configuration(config_path))
        else:
            request = CompileRequest(server_path=None, client_path=None, output_dir=Path("."))
        request = classify_proto_files(request, proto_files)
        request = _apply_overrides(
            request,
            server_path=server_path,
            client_path=client_path,
            target=target,
            custom_namespace=custom_namespace,
            output_dir=output_dir,
            file_name=file_name,
        )
        outcome = execute_compilation(request)
    except (ConfigurationError, CompilationError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(outcome.output_path))


@cli.command(name="targets")
def list_targets() -> None:
    """List the registered generation targets."""
    for target_id, display_name in default_registry().targets():
        click.echo(f"{target_id}\t{display_name}")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML compile configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML compile configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def _apply_overrides(
    request: CompileRequest,
    *,
    server_path: Path | None,
    client_path: Path | None,
    target: str | None,
    custom_namespace: str | None,
    output_dir: Path | None,
    file_name: str | None,
) -> CompileRequest:
    if server_path is not None:
        request = replace(request, server_path=server_path)
    if client_path is not None:
        request = replace(request, client_path=client_path)
    if target:
        request = replace(request, target=target)
    if custom_namespace is not None:
        request = replace(request, custom_namespace=custom_namespace.strip())
    if output_dir is not None:
        request = replace(request, output_dir=output_dir)
    if file_name:
        request = replace(request, file_name=file_name)
    return request


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), prog_name="pomeloc", standalone_mode=False)
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
