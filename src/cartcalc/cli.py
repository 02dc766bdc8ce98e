"""
Command Line Interface for cartcalc
"""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from .checkout import Checkout
from .formatter import CheckoutFormatter
from .exceptions import CartError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True)]
)
logger = logging.getLogger("cartcalc")

app = typer.Typer(
    name="cartcalc",
    help="Shopping cart total calculator with standard, tax and factorial discounts",
    no_args_is_help=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        from . import __version__
        console.print(f"cartcalc version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version information"
    ),
) -> None:
    """Run the demo cart through checkout and print every step."""

    if verbose:
        logger.setLevel(logging.DEBUG)
        logger.debug("Verbose mode enabled")

    try:
        _run_checkout(Checkout())

    except CartError as e:
        logger.error(f"Checkout error: {e}")
        raise typer.Exit(code=1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        if verbose:
            logger.exception("Full traceback:")
        raise typer.Exit(code=1)


def _run_checkout(checkout: Checkout) -> None:
    """
    Run the checkout and display the report
    """
    logger.debug("Running checkout...")
    result = checkout.run()

    formatter = CheckoutFormatter(console=console)
    console.print(formatter.format_report(result))


if __name__ == "__main__":
    typer.run(main)
