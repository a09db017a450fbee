"""
Core CLI implementation for the catalog package.
"""

import click
from pathlib import Path

from .config import Config
from .logging import setup_logging, get_logger
from ..commands import (
    AddProductCommand,
    ImportProductsCommand,
    InitDatabaseCommand,
    PRODUCT_TYPES,
    ReportCommand,
    ShowProductCommand,
    TestConnectionCommand
)
from ..writers import WRITERS

def _run(command):
    """Execute a command, turning any failure into a red message and exit code 1."""
    try:
        return command.execute()
    except Exception as e:
        click.secho(f"Error: {str(e)}", fg='red', err=True)
        raise click.Abort()

@click.group()
@click.option('--debug', is_flag=True, help='Enable detailed debug output')
@click.pass_context
def cli(ctx, debug: bool):
    """Product catalog CLI tool"""
    ctx.ensure_object(dict)
    ctx.obj['debug'] = debug

    try:
        config = Config.from_env()
        config.validate()
    except Exception as e:
        click.echo(f"Error initializing configuration: {str(e)}", err=True)
        ctx.exit(1)

    setup_logging(debug=debug, log_dir=config.log_dir, level=config.log_level)
    logger = get_logger('cli')
    if debug:
        logger.debug(f"Using database: {config.database_url}")
    ctx.obj['config'] = config

@cli.command('init-db')
@click.pass_context
def init_db(ctx):
    """Create the products table."""
    _run(InitDatabaseCommand(ctx.obj['config']))

@cli.command('test-connection')
@click.pass_context
def test_connection(ctx):
    """Test database connectivity"""
    _run(TestConnectionCommand(ctx.obj['config']))

@cli.command('add')
@click.argument('title')
@click.argument('main_name')
@click.argument('price')
@click.option('--first-name', default='', help="Producer's first name")
@click.option('--type', 'product_type', type=click.Choice(PRODUCT_TYPES), default='shop', show_default=True)
@click.option('--pages', 'num_pages', type=int, help='Page count (books)')
@click.option('--play-length', type=int, help='Play length (CDs)')
@click.option('--discount', type=int, default=0, show_default=True, help='Discount percent')
@click.pass_context
def add_product(ctx, title, main_name, price, first_name, product_type, num_pages, play_length, discount):
    """Store a product and print its id."""
    _run(AddProductCommand(
        ctx.obj['config'],
        product_type,
        title,
        main_name,
        price,
        first_name=first_name,
        num_pages=num_pages,
        play_length=play_length,
        discount=discount
    ))

@cli.command('show')
@click.argument('product_id', type=int)
@click.pass_context
def show_product(ctx, product_id: int):
    """Show a stored product's summary and price."""
    _run(ShowProductCommand(ctx.obj['config'], product_id))

@cli.command('report')
@click.argument('product_ids', nargs=-1, type=int)
@click.option('--format', 'output_format', type=click.Choice(list(WRITERS)), help='Output format (defaults to OUTPUT_FORMAT)')
@click.option('--output', type=click.Path(file_okay=True, dir_okay=False, path_type=Path), help='Save the report to file')
@click.pass_context
def report(ctx, product_ids, output_format, output: Path | None):
    """Render a report of the given products, or of all products."""
    _run(ReportCommand(ctx.obj['config'], product_ids, output_format, output))

@cli.command('import-products')
@click.argument('file', type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path))
@click.option('--batch-size', type=int, help='Rows per batch (defaults to BATCH_SIZE)')
@click.pass_context
def import_products(ctx, file: Path, batch_size: int | None):
    """Import products from a CSV file."""
    exit_code = _run(ImportProductsCommand(ctx.obj['config'], file, batch_size))
    if exit_code:
        ctx.exit(exit_code)
