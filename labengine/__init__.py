"""OBJ mesh loading, binary mesh caching, quadric simplification and editor helpers."""

__version__ = "0.1.0"