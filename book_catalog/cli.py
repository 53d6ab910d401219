"""
Command line entry point for the book catalog server.
"""

import click

from book_catalog.logging import configure_logging, get_logger
from book_catalog.schema import print_schema
from book_catalog.server import DEFAULT_HOST, DEFAULT_PORT, serve

logger = get_logger(__name__)


@click.command()
@click.option("--host", default=DEFAULT_HOST, help=f"Host to bind to (default: {DEFAULT_HOST})")
@click.option("--port", default=DEFAULT_PORT, type=int, help=f"Port to bind to (default: {DEFAULT_PORT})")
@click.option("--debug", is_flag=True, default=False, help="Human-readable debug logging")
@click.option("--print-schema", "show_schema", is_flag=True, default=False, help="Print the schema SDL and exit")
def main(host: str, port: int, debug: bool, show_schema: bool) -> None:
    """Serve the book catalog GraphQL API."""
    if show_schema:
        click.echo(print_schema())
        return

    configure_logging(debug=debug)
    logger.debug("Starting book catalog server", host=host, port=port)
    serve(host=host, port=port)


if __name__ == "__main__":
    main()
