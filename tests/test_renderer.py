import math
import os
import tempfile
import unittest

from PIL import Image as PILImage

from core.math import Vec3
from core.color import Color
from core.material import Material
from core.geometry import Sphere
from core.image import Image
from core.scene import Scene, Light, RenderSettings
from core.camera import Camera
from renderers.base_renderer import RendererFactory, image_to_view_plane
from renderers.cpu_renderer import CPURenderer
from renderers.flat_renderer import FlatRenderer


def axis_camera() -> Camera:
    # z축 위 거리 5에서 원점을 바라봄
    return Camera(position=Vec3(0, 0, 5), direction=Vec3(0, 0, -1), up=Vec3(0, 1, 0),
                  view_plane_distance=1.0, view_plane_width=1.0, view_plane_height=1.0,
                  front_plane_distance=0.0, back_plane_distance=100.0)


class CPURendererTests(unittest.TestCase):
    def setUp(self) -> None:
        self.material = Material(
            ambient=Color(0.1, 0.0, 0.0, 1.0),
            diffuse=Color(0.8, 0.2, 0.2, 1.0),
            specular=Color(0.0, 0.0, 0.0, 0.0),
            shininess=10,
        )
        self.scene = Scene()
        self.scene.add_object(Sphere(Vec3(0, 0, 0), 1.0, self.material))
        self.scene.add_light(Light(Vec3(5, 0, 5)))
        self.settings = RenderSettings(width=10, height=10, verbose=False)

    def test_center_pixel_closed_form(self) -> None:
        image = CPURenderer().render(self.scene, axis_camera(), self.settings)
        center = image.get_pixel(5, 5)

        n_dot_t = 4 / math.sqrt(41)
        self.assertAlmostEqual(center.red, 0.1 + 0.8 * n_dot_t)
        self.assertAlmostEqual(center.green, 0.2 * n_dot_t)
        self.assertAlmostEqual(center.blue, 0.2 * n_dot_t)

    def test_corner_pixels_are_background(self) -> None:
        image = CPURenderer().render(self.scene, axis_camera(), self.settings)
        for i, j in ((0, 0), (9, 0), (0, 9), (9, 9)):
            self.assertEqual(image.get_pixel(i, j), Color())

    def test_custom_background(self) -> None:
        background = Color(0.0, 0.0, 0.3, 1.0)
        settings = RenderSettings(width=10, height=10, background=background, verbose=False)
        image = CPURenderer().render(self.scene, axis_camera(), settings)
        self.assertEqual(image.get_pixel(0, 0), background)
        self.assertNotEqual(image.get_pixel(5, 5), background)

    def test_empty_scene_renders_background(self) -> None:
        image = CPURenderer().render(Scene(), axis_camera(), RenderSettings(width=4, height=3, verbose=False))
        self.assertEqual((image.width, image.height), (4, 3))
        for i in range(4):
            for j in range(3):
                self.assertEqual(image.get_pixel(i, j), Color())

    def test_back_plane_clips_geometry(self) -> None:
        camera = Camera(position=Vec3(0, 0, 5), direction=Vec3(0, 0, -1), up=Vec3(0, 1, 0),
                        view_plane_distance=1.0, view_plane_width=1.0, view_plane_height=1.0,
                        front_plane_distance=0.0, back_plane_distance=3.0)
        image = CPURenderer().render(self.scene, camera, self.settings)
        self.assertEqual(image.get_pixel(5, 5), Color())


class FlatRendererTests(unittest.TestCase):
    def test_right_axis_is_up_cross_direction(self) -> None:
        red = Color(1, 0, 0, 1)
        scene = Scene()
        # up × direction = (-1, 0, 0): u > 0 인 열은 -x 쪽을 본다
        scene.add_object(Sphere(Vec3(-2, 0, 0), 1.0, Material(), red))
        image = FlatRenderer().render(scene, axis_camera(), RenderSettings(width=10, height=10, verbose=False))

        self.assertEqual(image.get_pixel(9, 5), red)
        self.assertEqual(image.get_pixel(1, 5), Color())

    def test_writes_flat_geometry_color(self) -> None:
        blue = Color(0, 0, 1, 1)
        scene = Scene()
        scene.add_object(Sphere(Vec3(0, 0, 0), 1.0, Material(ambient=Color(0.3, 0.3, 0.3, 1)), blue))
        scene.add_light(Light(Vec3(5, 5, 5)))
        image = FlatRenderer().render(scene, axis_camera(), RenderSettings(width=10, height=10, verbose=False))
        self.assertEqual(image.get_pixel(5, 5), blue)


class RendererFactoryTests(unittest.TestCase):
    def test_registered_renderers(self) -> None:
        available = RendererFactory.list_available()
        self.assertIn("cpu_raytracer", available)
        self.assertIn("flat", available)
        renderer = RendererFactory.create("cpu_raytracer")
        self.assertIsInstance(renderer, CPURenderer)
        self.assertTrue(renderer.supports("shadows"))
        self.assertFalse(RendererFactory.create("flat").supports("shadows"))

    def test_unknown_renderer(self) -> None:
        with self.assertRaises(ValueError):
            RendererFactory.create("cuda_path_raytracer")


class ViewPlaneMappingTests(unittest.TestCase):
    def test_image_to_view_plane(self) -> None:
        self.assertAlmostEqual(image_to_view_plane(0, 10, 2.0), -1.0)
        self.assertAlmostEqual(image_to_view_plane(5, 10, 2.0), 0.0)
        self.assertAlmostEqual(image_to_view_plane(9, 10, 2.0), 0.8)

    def test_camera_up_is_orthogonalized(self) -> None:
        camera = Camera(Vec3(0, 0, 0), Vec3(0, 0, -2), Vec3(0, 1, 1), 1.0, 1.0, 1.0, 0.0, 10.0)
        self.assertAlmostEqual(camera.direction.length(), 1.0)
        self.assertAlmostEqual(camera.up.dot(camera.direction), 0.0)
        self.assertAlmostEqual(camera.up.y, 1.0)

    def test_camera_rejects_parallel_up(self) -> None:
        with self.assertRaises(ValueError):
            Camera(Vec3(0, 0, 0), Vec3(0, 1, 0), Vec3(0, 2, 0), 1.0, 1.0, 1.0, 0.0, 10.0)

    def test_camera_rejects_inverted_clipping(self) -> None:
        with self.assertRaises(ValueError):
            Camera(Vec3(0, 0, 0), Vec3(0, 0, -1), Vec3(0, 1, 0), 1.0, 1.0, 1.0, 10.0, 1.0)


class ImageTests(unittest.TestCase):
    def test_pixel_round_trip(self) -> None:
        image = Image(3, 2)
        color = Color(0.25, 0.5, 0.75, 1.0)
        image.set_pixel(2, 1, color)
        self.assertEqual(image.get_pixel(2, 1), color)
        self.assertEqual(image.get_pixel(0, 0), Color())

    def test_rows_flipped_on_encode(self) -> None:
        image = Image(4, 3)
        image.set_pixel(0, 2, Color(1, 0, 0, 1))
        pil_image = image.to_pil()
        self.assertEqual(pil_image.size, (4, 3))
        self.assertEqual(pil_image.mode, "RGBA")
        self.assertEqual(pil_image.getpixel((0, 0)), (255, 0, 0, 255))
        self.assertEqual(pil_image.getpixel((0, 2)), (0, 0, 0, 0))

    def test_save_png_and_jpeg(self) -> None:
        image = Image(4, 3)
        image.set_pixel(1, 1, Color(2.0, 0.5, -1.0, 1.0))
        with tempfile.TemporaryDirectory() as tmp:
            png_path = os.path.join(tmp, "out.png")
            image.save(png_path)
            with PILImage.open(png_path) as saved:
                self.assertEqual(saved.size, (4, 3))
                self.assertEqual(saved.getpixel((1, 1)), (255, 128, 0, 255))

            jpg_path = os.path.join(tmp, "out.jpg")
            image.save(jpg_path)
            with PILImage.open(jpg_path) as saved:
                self.assertEqual(saved.mode, "RGB")

    def test_invalid_size(self) -> None:
        with self.assertRaises(ValueError):
            Image(0, 5)


if __name__ == "__main__":
    unittest.main()
