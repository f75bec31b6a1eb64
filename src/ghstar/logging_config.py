import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(debug: bool = False):
    level = logging.DEBUG if debug else logging.INFO

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=debug,
        show_path=debug,
        markup=False,
    )
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )
