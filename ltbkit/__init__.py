"""General-purpose utilities: errors, flags, durations and timers, guards, JSON settings and GPU enum names."""

__version__ = "0.0.1"