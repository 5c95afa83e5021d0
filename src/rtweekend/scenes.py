# scenes.py
import random
from rtweekend.core.vector import Vector3
from rtweekend.core.utils import random_double, random_vector
from rtweekend.camera.camera import Camera
from rtweekend.geometry.world import HittableList
from rtweekend.geometry.sphere import Sphere
from rtweekend.materials.lambertian import Lambertian
from rtweekend.materials.metal import Metal
from rtweekend.materials.dielectric import Dielectric
from rtweekend.materials.presets import DielectricPresets, DiffusePresets, MetalPresets

UP = Vector3(0, 1, 0)

def two_spheres(rng=None) -> HittableList:
    """A diffuse sphere resting on a huge ground sphere."""
    world = HittableList()
    world.add(Sphere(Vector3(0, 0, -1), 0.5, DiffusePresets.matte(DiffusePresets.CLAY)))
    world.add(Sphere(Vector3(0, -100.5, -1), 100, DiffusePresets.matte(DiffusePresets.GRASS)))
    return world

def two_spheres_camera(aspect_ratio: float) -> Camera:
    return Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), UP, 90, aspect_ratio)

def material_showcase(rng=None) -> HittableList:
    """Diffuse, hollow glass and metal spheres side by side."""
    glass = DielectricPresets.glass()
    world = HittableList()
    world.add(Sphere(Vector3(0, -100.5, -1), 100, DiffusePresets.matte(DiffusePresets.GRASS)))
    world.add(Sphere(Vector3(0, 0, -1), 0.5, DiffusePresets.matte(DiffusePresets.NAVY)))
    # Negative inner radius flips the normals, leaving a thin glass shell
    world.add(Sphere(Vector3(-1, 0, -1), 0.5, glass))
    world.add(Sphere(Vector3(-1, 0, -1), -0.4, glass))
    world.add(Sphere(Vector3(1, 0, -1), 0.5, MetalPresets.brass()))
    return world

def material_showcase_camera(aspect_ratio: float) -> Camera:
    lookfrom = Vector3(3, 3, 2)
    lookat = Vector3(0, 0, -1)
    return Camera(lookfrom, lookat, UP, 20, aspect_ratio,
                  aperture=0.1, focus_dist=(lookfrom - lookat).length())

def random_scene(rng=None) -> HittableList:
    """
    Ground plane of small random spheres around three large feature spheres.
    """
    if rng is None:
        rng = random.Random(0)
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(DiffusePresets.GROUND)))

    clearing = Vector3(4, 0.2, 0)
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - clearing).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                albedo = random_vector(rng) * random_vector(rng)
                material = Lambertian(albedo)
            elif choose_mat < 0.95:
                albedo = random_vector(rng, 0.5, 1)
                material = Metal(albedo, random_double(rng, 0, 0.5))
            else:
                material = DielectricPresets.glass()
            world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(DiffusePresets.EARTH)))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, MetalPresets.mirror()))
    return world

def random_scene_camera(aspect_ratio: float) -> Camera:
    return Camera(Vector3(13, 2, 3), Vector3(0, 0, 0), UP, 20, aspect_ratio,
                  aperture=0.1, focus_dist=10.0)

# name -> (world builder, camera builder)
SCENES = {
    "two-spheres": (two_spheres, two_spheres_camera),
    "showcase": (material_showcase, material_showcase_camera),
    "random": (random_scene, random_scene_camera),
}
