"""panelnest - extract flat panels from 3D models and nest them on stock sheets."""

__version__ = "0.1.0"
