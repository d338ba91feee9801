# Re-export schema types
from .enums import RangeKind, TimeUnit, Weekday

__all__ = ["RangeKind", "TimeUnit", "Weekday"]
