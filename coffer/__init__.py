"""Mini README: Core package initializer for the Coffer service.

Coffer keeps an adventurer's inventory and a gold/silver/copper wallet
behind a small HTTP interface. This module exposes the logging helper so
submodules and scripts share one configuration entry point without pulling
in the web stack.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
