# materials/metal.py
from typing import Optional, Tuple
from rtweekend.core.ray import Ray
from rtweekend.core.vector import Vector3
from rtweekend.core.utils import reflect, random_in_unit_sphere
from rtweekend.geometry.hittable import HitRecord
from rtweekend.materials.material import Material

class Metal(Material):
    """
    Metal material with reflective properties. fuzz is clamped to 1.
    """
    def __init__(self, albedo: Vector3, fuzz: float = 0.0):
        self.albedo = albedo
        self.fuzz = min(fuzz, 1)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Ray, Vector3]]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        scattered = Ray(rec.p, reflected + random_in_unit_sphere(rng) * self.fuzz)

        if scattered.direction.dot(rec.normal) > 0:
            return scattered, self.albedo

        return None  # Absorb the ray if the fuzz pushed it below the surface

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"
