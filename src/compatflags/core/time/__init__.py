from compatflags.core.time.abc import Time
from compatflags.core.time.real import RealTime

__all__ = ["RealTime", "Time"]
