"""Boids flocking simulation with scout groups, a fly-through camera and rendering transforms."""

__version__ = "0.1.0"