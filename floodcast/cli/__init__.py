"""CLI package of floodcast.

Execute via:
  python -m floodcast.cli <command> [options]

or the ``floodcast`` console script declared in ``pyproject.toml``.
"""

from .main import main  # re-export for python -m floodcast.cli

__all__ = ["main"]
