"""Deferred-callback state cells and the cooperative update scheduler."""

from .deferred import DeferredState
from .scheduler import UpdateScheduler

__all__ = ["DeferredState", "UpdateScheduler"]
