"""Simple AES Tool: command-line file and key checks for AES in ECB mode."""

__version__ = "1.0.0"
__all__ = ["aes", "cli", "errors"]