"""Crop-to-fill geometry and resampling."""

from .geometry import compute_geometry
from .resample import resample

__all__ = ["compute_geometry", "resample"]
