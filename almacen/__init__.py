"""Terminal manager for a product and warehouse inventory, kept in memory."""

__version__ = "0.1.0"
__all__ = ["__version__"]