"""ANSI-aware layout, styles, log overlay, topology and shell helpers for an EOS cluster terminal interface."""

__version__ = "0.1.0"