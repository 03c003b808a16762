"""Allow running gockerfile with python -m."""

from .cli.main import cli


if __name__ == '__main__':
    cli()
