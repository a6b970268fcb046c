"""String, file and directory helpers with growable string containers."""

__version__ = "0.1.0"
__all__ = ["common", "string_list", "string_buffer"]