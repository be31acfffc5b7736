"""Shared helpers: card strings, configuration and console logging."""
