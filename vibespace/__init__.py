"""Binary data encoding helpers and compact balanced ternary packing."""

__version__ = "0.1.0"