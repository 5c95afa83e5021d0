"""Monte-Carlo path tracer for scenes of spheres."""

__version__ = "0.1.0"
