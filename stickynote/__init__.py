"""A frameless, always-on-top sticky note driven by keyboard shortcuts."""

__version__ = "0.1.0"