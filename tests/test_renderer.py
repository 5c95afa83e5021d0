import io

import numpy as np
import pytest

from rtweekend.camera.camera import Camera
from rtweekend.core.ray import Ray
from rtweekend.core.vector import Vector3
from rtweekend.geometry.sphere import Sphere
from rtweekend.geometry.world import HittableList
from rtweekend.materials.lambertian import Lambertian
from rtweekend.materials.material import Material
from rtweekend.materials.metal import Metal
from rtweekend.renderer.ppm import write_ppm
from rtweekend.renderer.raytracer import Renderer, ray_color
from rtweekend.renderer.tone_mapping import gamma_tone_mapping, write_color


class Absorber(Material):
    def scatter(self, ray_in, rec, rng):
        return None


class BounceUp(Material):
    """Sends every ray straight up at half strength."""

    def scatter(self, ray_in, rec, rng):
        return Ray(rec.p, Vector3(0, 1, 0)), Vector3(0.5, 0.5, 0.5)


def ground(material):
    return HittableList([Sphere(Vector3(0, -100, 0), 100, material)])


def test_background_gradient(rng):
    world = HittableList()
    up = ray_color(Ray(Vector3(0, 0, 0), Vector3(0, 1, 0)), world, 10, rng)
    down = ray_color(Ray(Vector3(0, 0, 0), Vector3(0, -3, 0)), world, 10, rng)
    level = ray_color(Ray(Vector3(0, 0, 0), Vector3(1, 0, 0)), world, 10, rng)
    assert tuple(up) == pytest.approx((0.5, 0.7, 1.0))
    assert tuple(down) == pytest.approx((1.0, 1.0, 1.0))
    assert tuple(level) == pytest.approx((0.75, 0.85, 1.0))


def test_zero_depth_is_black(rng):
    ray = Ray(Vector3(0, 0, 0), Vector3(0, 1, 0))
    for world in (HittableList(), ground(Lambertian(Vector3(1, 1, 1)))):
        assert tuple(ray_color(ray, world, 0, rng)) == (0, 0, 0)
        assert tuple(ray_color(ray, world, -1, rng)) == (0, 0, 0)


def test_absorbing_material_is_black(rng):
    ray = Ray(Vector3(0, 1, 0), Vector3(0, -1, 0))
    assert tuple(ray_color(ray, ground(Absorber()), 5, rng)) == (0, 0, 0)


def test_attenuation_multiplies_recursive_color(rng):
    ray = Ray(Vector3(0, 1, 0), Vector3(0, -1, 0))
    world = ground(BounceUp())
    assert tuple(ray_color(ray, world, 2, rng)) == pytest.approx((0.25, 0.35, 0.5))
    # One bounce only: the bounced ray has no budget left
    assert tuple(ray_color(ray, world, 1, rng)) == (0, 0, 0)


def test_write_color_gamma_and_quantization():
    assert write_color(Vector3(0, 0, 0), 1) == (0, 0, 0)
    assert write_color(Vector3(1.0, 0.25, 0.0), 1) == (255, 128, 0)
    # Averaging over samples happens before the gamma step
    assert write_color(Vector3(4.0, 1.0, 0.0), 4) == (255, 128, 0)
    # Overbright values saturate at 255, never 256
    assert write_color(Vector3(9.0, 1.0, 100.0), 1) == (255, 255, 255)


def test_gamma_tone_mapping_matches_write_color(rng):
    buffer = np.array([[[rng.uniform(0, 3) for _ in range(3)] for _ in range(5)]
                       for _ in range(4)])
    image = gamma_tone_mapping(buffer, 2)
    assert image.dtype == np.uint8
    assert image.shape == (4, 5, 3)
    for row in range(4):
        for col in range(5):
            expected = write_color(Vector3(*buffer[row, col]), 2)
            assert tuple(int(c) for c in image[row, col]) == expected


def test_write_ppm_layout():
    image = np.array([[[255, 0, 0], [0, 255, 0]],
                      [[0, 0, 255], [10, 20, 30]]], dtype=np.uint8)
    out = io.StringIO()
    write_ppm(out, image)
    assert out.getvalue() == "P3\n2 2\n255\n255 0 0\n0 255 0\n0 0 255\n10 20 30\n"


def test_renderer_rejects_bad_settings():
    with pytest.raises(ValueError):
        Renderer(0, 2)
    with pytest.raises(ValueError):
        Renderer(2, 2, samples_per_pixel=0)
    with pytest.raises(ValueError):
        Renderer(2, 2, max_depth=0)


def looking_down_camera():
    return Camera(Vector3(0, 1, 0), Vector3(0, 0, 0), Vector3(0, 0, -1), 30, 1.0)


def test_end_to_end_two_by_two_ppm():
    world = HittableList([Sphere(Vector3(0, -1000, 0), 1000, Lambertian(Vector3(0.5, 0.5, 0.5)))])
    image = Renderer(2, 2, samples_per_pixel=1, max_depth=10, seed=7).render(
        world, looking_down_camera())
    out = io.StringIO()
    write_ppm(out, image)
    text = out.getvalue()
    assert text.startswith("P3\n2 2\n255\n")
    lines = text.splitlines()[3:]
    assert len(lines) == 4
    for line in lines:
        values = [int(v) for v in line.split()]
        assert len(values) == 3
        assert all(0 <= v <= 255 for v in values)


def test_rows_run_top_to_bottom():
    # Top row looks up into the blue, bottom row looks down toward white
    cam = Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), Vector3(0, 1, 0), 90, 1.0)
    image = Renderer(1, 4, samples_per_pixel=4, max_depth=1).render(HittableList(), cam)
    assert image.shape == (4, 1, 3)
    top_red, bottom_red = int(image[0, 0, 0]), int(image[3, 0, 0])
    assert top_red < bottom_red


def test_render_is_deterministic_for_a_seed():
    world = HittableList([Sphere(Vector3(0, -1000, 0), 1000, Lambertian(Vector3(0.5, 0.5, 0.5)))])
    cam = Camera(Vector3(0, 1, 2), Vector3(0, 0, 0), Vector3(0, 1, 0), 60, 1.5)
    for per_pixel in (False, True):
        a = Renderer(6, 4, 3, 5, seed=11, per_pixel_seed=per_pixel).render(world, cam)
        b = Renderer(6, 4, 3, 5, seed=11, per_pixel_seed=per_pixel).render(world, cam)
        assert np.array_equal(a, b)


def test_per_pixel_seed_is_independent_of_traversal():
    world = HittableList([Sphere(Vector3(0, -1000, 0), 1000, Lambertian(Vector3(0.5, 0.5, 0.5)))])
    cam = Camera(Vector3(0, 1, 2), Vector3(0, 0, 0), Vector3(0, 1, 0), 60, 1.5)
    renderer = Renderer(6, 4, 3, 5, seed=3, per_pixel_seed=True)
    image = renderer.render(world, cam)
    # Re-sample one pixel on its own stream: same sum, same bytes
    i, j = 4, 1
    color = renderer.sample_pixel(world, cam, i, j, renderer.pixel_rng(i, j))
    row = renderer.height - 1 - j
    assert tuple(int(c) for c in image[row, i]) == write_color(color, 3)


def test_trapped_path_runs_out_of_bounces_without_deep_stack(rng):
    # Perfect mirror sphere around the camera: the path never escapes
    world = HittableList([Sphere(Vector3(0, 0, 0), 10.0, Metal(Vector3(0.9, 0.9, 0.9), 0.0))])
    ray = Ray(Vector3(0, 0, 0), Vector3(0.3, 0.2, -1))
    assert tuple(ray_color(ray, world, 2000, rng)) == (0, 0, 0)


class HalfBounceUp(Material):
    def scatter(self, ray_in, rec, rng):
        return Ray(rec.p, Vector3(0, 1, 0)), Vector3(0.5, 0.25, 1.0)


def test_throughput_multiplies_across_bounces(rng):
    lower = Sphere(Vector3(0, -100, 0), 100, BounceUp())
    upper_shell = Sphere(Vector3(0, 0, 0), 5.0, HalfBounceUp())
    world = HittableList([lower, upper_shell])
    # From inside the shell: down to the floor, up to the shell, up into the sky
    ray = Ray(Vector3(0, 1, 0), Vector3(0, -1, 0))
    color = ray_color(ray, world, 3, rng)
    assert tuple(color) == pytest.approx((0.5 * 0.5 * 0.5, 0.5 * 0.25 * 0.7, 0.5 * 1.0 * 1.0))
    # With one bounce fewer the path is cut off before escaping
    assert tuple(ray_color(ray, world, 2, rng)) == (0, 0, 0)
