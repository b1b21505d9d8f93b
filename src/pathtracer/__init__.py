"""Offline Monte Carlo path tracer: spheres, BVH, textured materials."""

__version__ = "0.1.0"
