"""App configuration for the core Django app."""

from __future__ import annotations

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Configuration for the `core` app (formatting capabilities and commands)."""

    name = "core"
    verbose_name = "Board game stats"
