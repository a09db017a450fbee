"""Run the catalog CLI with `python -m catalog.cli`."""

from .main import cli

if __name__ == '__main__':
    cli(prog_name='catalog')
