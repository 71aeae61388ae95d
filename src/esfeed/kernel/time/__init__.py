"""Kernel time – clocks and timestamp helpers."""
from esfeed.kernel.time.clock import Clock, FrozenClock, SystemClock, atom_time

__all__ = ["Clock", "FrozenClock", "SystemClock", "atom_time"]
