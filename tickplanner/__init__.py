"""Plan tick-by-tick player action sequences on a tile grid."""

__version__ = "0.1.0"