"""Base64 encoding and DES encryption with PBKDF2-derived keys."""

__version__ = "0.1.0"

__all__ = ["base64codec", "sha256", "pbkdf2", "hexkey", "des", "modes", "envelope", "cli"]