"""Package for fortune source code.

Expose subpackages for easier imports, e.g. `from src import core, storage`.
"""

from . import core, storage  # re-export packages

__all__ = ["core", "storage"]
