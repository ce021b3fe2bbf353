"""Pure-Python MD5, SHA-224, SHA-256, SHA-384 and SHA-512 digests and a small command-line tool."""

__version__ = "0.1.0"
__all__ = ["args", "cli", "common", "md5", "sha256", "sha512"]