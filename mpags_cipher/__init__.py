"""Encrypt and decrypt text with chains of classical ciphers."""

__version__ = "0.5.0"
