"""Serial catalog transform package."""

import importlib.metadata

__license__ = "MIT"
__version__ = importlib.metadata.version("serial-catalog")
