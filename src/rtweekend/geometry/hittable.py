# geometry/hittable.py
from typing import Optional
from rtweekend.core.vector import Vector3
from rtweekend.core.ray import Ray

class HitRecord:
    """
    Result of one ray/surface test, discarded after the bounce it serves.

    normal is unit length and satisfies ray.direction . normal <= 0;
    front_face tells whether the geometric outward normal was kept.
    """
    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0, front_face: bool = True, material = None):
        self.p = p
        self.normal = normal
        self.t = t
        self.front_face = front_face
        self.material = material

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Orient the unit outward normal against the ray. A tangent ray
        (dot product 0) can only come from outside, so it counts as front face.
        """
        self.front_face = ray.direction.dot(outward_normal) <= 0
        self.normal = outward_normal if self.front_face else -outward_normal

class Hittable:
    """
    Anything a ray can be tested against. Implementations never raise for
    degenerate input; they report no hit instead.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """
        Returns the nearest intersection with t strictly inside
        (t_min, t_max), or None.
        """
        raise NotImplementedError("hit() must be implemented by subclasses.")
