# materials/material.py
from typing import Optional, Tuple
from rtweekend.core.ray import Ray
from rtweekend.core.vector import Vector3
from rtweekend.geometry.hittable import HitRecord

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials are immutable and may be shared by any number of spheres.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Ray, Vector3]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation), or None when the
        incident light is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
