"""Interface de linha de comando do filtro de empacotamento seletivo.

Cada linha de log é impressa com o prefixo `[<step_id>]:`, identificando
o plugin que a emitiu.
"""

import sys

import click

from . import __version__
from .core.config import ConfigError, load_service_config
from .core.service.log import NOTICE, VERBOSE
from .core.service.types import PackageStatus
from .runner import package_service


def _format_event(event):
    return f"[{event['step_id']}]: {event['message']}"


def _render_events(ctx, verbose):
    for event in ctx.events:
        level = event["level"]
        if level == NOTICE or (level == VERBOSE and verbose):
            click.echo(_format_event(event))

    for step_id, messages in ctx.warnings.items():
        for message in messages:
            click.echo(f"Warning ({step_id}): {message}", err=True)


@click.group()
@click.version_option(version=__version__)
def main():
    """Remove unidades marcadas com toDeploy: false antes do empacotamento."""
    pass


@main.command()
@click.argument("config_path", type=click.Path(dir_okay=False))
@click.option("--local", "local_path", type=click.Path(dir_okay=False), default=None,
              help="Arquivo de override local, mesclado sobre CONFIG_PATH quando existe")
@click.option("--verbose", "-v", is_flag=True, help="Saída detalhada")
@click.option("--run-id", default=None, help="Identificador gravado em cada evento de log")
def package(config_path, local_path, verbose, run_id):
    """Executa uma passada de empacotamento sobre as funções de CONFIG_PATH.

    Exemplo:
        selective-deploy package serverless.yml --local serverless.local.yml -v
    """
    try:
        config = load_service_config(config_path=config_path, local_path=local_path)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    result, ctx, _ = package_service(config, options={"verbose": verbose}, run_id=run_id)
    _render_events(ctx, verbose)

    if result.status == PackageStatus.FAILED:
        error = result.error or {}
        click.echo(f"Error: {error.get('message')}", err=True)
        if error.get("hint"):
            click.echo(f"Hint: {error['hint']}", err=True)
        sys.exit(1)

    if result.packaged:
        click.echo(f"Packaged: {', '.join(result.packaged)}")
    else:
        click.echo("Packaged: (none)")


if __name__ == "__main__":
    main()
