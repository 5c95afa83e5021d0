# core/ray.py
from rtweekend.core.vector import Vector3

class Ray:
    """
    Half-line origin + t * direction. direction is not normalized, and
    every t along the ray is measured in units of its length.
    """
    def __init__(self, origin: Vector3, direction: Vector3):
        self.origin = origin
        self.direction = direction

    def at(self, t: float) -> Vector3:
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
