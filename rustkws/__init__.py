"""Rust keywords and their category (strict, reserved, weak) in each edition."""

__version__ = "0.1.0"