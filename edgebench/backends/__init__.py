"""Backends compared by the benchmark."""

from typing import List

from ..config import Settings
from .base import Backend
from .neon import NeonBackend
from .turso import TursoBackend

__all__ = [
    "Backend",
    "NeonBackend",
    "TursoBackend",
    "build_backends",
]


def build_backends(settings: Settings) -> List[Backend]:
    """Build the Neon and Turso backends, in benchmark order.

    Raises:
        ConfigError: If a database URL is missing.
    """
    neon_url = settings.require_neon_url()
    turso_url = settings.require_turso_url()
    return [
        NeonBackend(neon_url),
        TursoBackend(turso_url, settings.turso_auth_token),
    ]
