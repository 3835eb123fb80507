"""Thread management"""
from .compositor_thread import CompositorThread, CompositorData

__all__ = [
    "CompositorThread",
    "CompositorData",
]
