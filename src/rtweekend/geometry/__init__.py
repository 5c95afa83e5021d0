from rtweekend.geometry.hittable import HitRecord, Hittable
from rtweekend.geometry.sphere import Sphere
from rtweekend.geometry.world import HittableList
