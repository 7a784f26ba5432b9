"""Trade events passed between processes through a shared-memory ring buffer."""

__version__ = "0.1.0"
__all__ = ["__version__"]