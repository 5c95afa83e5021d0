from rtweekend.materials.material import Material
from rtweekend.materials.lambertian import Lambertian
from rtweekend.materials.metal import Metal
from rtweekend.materials.dielectric import Dielectric
