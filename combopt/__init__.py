"""Independent-set graph coloring, maximum clique and covering-matrix algorithms."""

__version__ = "0.1.0"