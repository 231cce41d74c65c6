"""Publish text from stdin as a shared 1Password Secure Note."""

__version__ = "2026.10.18"
