"""Application state container."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .settings import AssetInputSettings


@dataclass
class AppState:
    """Container for application-wide state and dependencies.

    Passed to CLI commands through the typer context to avoid global state.
    """

    settings: AssetInputSettings
    logger: logging.Logger
