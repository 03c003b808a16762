"""Main CLI entry point for gockerfile."""

import logging
import re
import sys

import click

from gockerfile import __version__
from gockerfile.core.constants import BINARY_NAME_ENVVAR
from gockerfile.core.dockerfile_generator import DockerfileGenerator
from gockerfile.core.exceptions import GockerfileError
from gockerfile.utils.project_detector import ProjectDetector, get_project_root


BINARY_NAME_PATTERN = re.compile(r"[A-Za-z0-9._-]+")


def validate_binary_name(ctx, param, value):
    """Accept only names that are safe to use as a file name in the Dockerfile."""
    if value is None:
        return value
    if not BINARY_NAME_PATTERN.fullmatch(value):
        raise click.BadParameter("may only contain letters, digits, '.', '_' and '-'")
    return value


@click.command()
@click.option('--binaryname', envvar=BINARY_NAME_ENVVAR, callback=validate_binary_name,
              help='Name of the binary which is created')
@click.option('-v', '--verbose', is_flag=True, help='Show debug output')
@click.version_option(version=__version__, prog_name='gockerfile')
def cli(binaryname, verbose):
    """Generate a multi-stage Dockerfile for the Go project in the current directory"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr
    )

    try:
        project_root = get_project_root()
        config = ProjectDetector(project_root).detect()
        if binaryname:
            config = config.with_binary_name(binaryname)

        dockerfile_path = DockerfileGenerator(project_root).write(config)
    except GockerfileError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Dockerfile written: {dockerfile_path} ({config.dependency_mode.value})")


if __name__ == '__main__':
    cli()
