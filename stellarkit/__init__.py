"""Stellar key encoding, amounts, binary helpers and XDR codecs."""

__version__ = "0.1.0"