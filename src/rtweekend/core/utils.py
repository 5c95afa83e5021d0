# core/utils.py
import math
from rtweekend.core.vector import Vector3

# Samplers draw from an explicit generator: any object with random(),
# normally a random.Random.

def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0

def clamp(x: float, lo: float, hi: float) -> float:
    if x < lo:
        return lo
    if x > hi:
        return hi
    return x

def random_double(rng, lo: float = 0.0, hi: float = 1.0) -> float:
    """
    Returns a random real number in [lo, hi).
    """
    return lo + (hi - lo) * rng.random()

def random_vector(rng, lo: float = 0.0, hi: float = 1.0) -> Vector3:
    return Vector3(random_double(rng, lo, hi),
                   random_double(rng, lo, hi),
                   random_double(rng, lo, hi))

def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point strictly inside the unit sphere.

    Rejection sampling from the [-1, 1] cube. Each draw is accepted with
    probability pi/6, so the loop ends almost surely.
    """
    while True:
        p = random_vector(rng, -1, 1)
        if p.length_squared() < 1.0:
            return p

def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    angle = random_double(rng, 0, 2 * math.pi)
    z = random_double(rng, -1, 1)
    r = math.sqrt(1 - z * z)
    return Vector3(r * math.cos(angle), r * math.sin(angle), z)

def random_in_unit_disk(rng) -> Vector3:
    """Random point in the unit disk on the z = 0 plane, used for the lens."""
    while True:
        p = Vector3(random_double(rng, -1, 1), random_double(rng, -1, 1), 0)
        if p.length_squared() < 1.0:
            return p

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the unit normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with unit normal n,
    splitting the result into parts perpendicular and parallel to n.
    """
    cos_theta = clamp(-uv.dot(n), -1.0, 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel
