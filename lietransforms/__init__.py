"""Lie groups SO2, SE2, SO3, SE3, ScSO3 and Sim3 with their Lie algebras."""

__version__ = "0.1.0"
__all__ = ["so2", "so3", "se2", "se3", "scso3", "sim3"]