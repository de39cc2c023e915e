"""Health check."""

from __future__ import annotations


def health_check() -> str:
    return "OK"
