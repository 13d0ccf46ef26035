"""Connectors for third-party listing APIs."""
