# materials/presets.py
from rtweekend.core.vector import Vector3
from rtweekend.materials.metal import Metal
from rtweekend.materials.lambertian import Lambertian
from rtweekend.materials.dielectric import Dielectric

class MetalPresets:
    """Named metals. Fuzz roughly tracks how polished the surface looks."""

    @staticmethod
    def gold(fuzz: float = 0.1) -> Metal:
        return Metal(Vector3(1.0, 0.78, 0.34), fuzz)

    @staticmethod
    def brass(fuzz: float = 0.0) -> Metal:
        return Metal(Vector3(0.8, 0.6, 0.2), fuzz)

    @staticmethod
    def silver(fuzz: float = 0.05) -> Metal:
        return Metal(Vector3(0.95, 0.93, 0.88), fuzz)

    @staticmethod
    def copper(fuzz: float = 0.1) -> Metal:
        return Metal(Vector3(0.95, 0.64, 0.54), fuzz)

    @staticmethod
    def mirror() -> Metal:
        return Metal(Vector3(0.7, 0.6, 0.5), 0.0)

    @staticmethod
    def brushed_steel() -> Metal:
        return Metal(Vector3(0.8, 0.8, 0.8), 0.3)

class DielectricPresets:
    """Dielectrics by refractive index."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

    @staticmethod
    def water() -> Dielectric:
        return Dielectric(1.33)

    @staticmethod
    def diamond() -> Dielectric:
        return Dielectric(2.42)

    @staticmethod
    def air_bubble() -> Dielectric:
        # Air pocket inside water
        return Dielectric(1.0 / 1.33)

class DiffusePresets:
    """Matte colors used by the demo scenes."""

    GROUND = Vector3(0.5, 0.5, 0.5)
    GRASS = Vector3(0.8, 0.8, 0.0)
    CLAY = Vector3(0.7, 0.3, 0.3)
    NAVY = Vector3(0.1, 0.2, 0.5)
    EARTH = Vector3(0.4, 0.2, 0.1)

    @staticmethod
    def matte(color: Vector3) -> Lambertian:
        return Lambertian(color)
