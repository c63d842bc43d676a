"""Logging setup with Rich integration.

The library only emits DEBUG records through ``digraph.*`` module loggers;
applications call ``setup_logging`` to see them.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Route graph lifecycle records to a Rich console.

    With ``verbose`` the ``digraph`` logger passes its DEBUG records (graph
    created, node added or removed with its cascaded edge count, edge added
    or removed). Otherwise only warnings from any logger are shown. Calling
    it again replaces the previous root handlers.

    Args:
        verbose: Show DEBUG lifecycle records from ``digraph.*`` loggers.
        console: Rich Console instance to write to (optional).
    """
    level = logging.DEBUG if verbose else logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=[handler],
        force=True,
    )
    logging.getLogger("digraph").setLevel(level)
