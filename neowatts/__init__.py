"""NeOWatts: estadísticas de energía renovable en América Latina."""

__version__ = "0.1.0"
