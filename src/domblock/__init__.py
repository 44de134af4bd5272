"""domblock: decide whether domains fall under a block-list."""

__version__ = "0.1.0"
