from core.math import Vec3
from core.color import Color
from core.material import Material
from core.geometry import Plane, Sphere, Triangle
from core.scene import Scene, Light, create_area_light
from core.camera import Camera


class DefaultSceneBuilder:
    """바닥 위에 구체 몇 개와 삼각형 하나를 놓은 기본 데모 씬"""

    def __init__(self):
        self.floor_size = 20.0
        self.floor_y = -1.0

        # 조명
        self.light_size = 2.0

    def build_scene(self) -> Scene:
        scene = Scene()

        materials = self._create_materials()

        self._create_floor(scene, materials)
        self._create_spheres(scene, materials)
        self._create_triangle(scene, materials)
        self._create_lighting(scene)

        scene.build_intersector()
        return scene

    def create_camera(self, aspect_ratio: float = 4.0 / 3.0) -> Camera:
        lookfrom = Vec3(0, 2.0, 12.0)
        lookat = Vec3(0, 0, 0)
        vup = Vec3(0, 1, 0)

        view_plane_height = 1.0
        return Camera.look_at(
            lookfrom, lookat, vup,
            view_plane_width=view_plane_height * aspect_ratio,
            view_plane_height=view_plane_height,
            view_plane_distance=1.5,
            front_plane_distance=0.0,
            back_plane_distance=1000.0,
        )

    def _create_materials(self) -> dict:
        return {
            'floor': Material(
                ambient=Color(0.1, 0.1, 0.1, 1.0),
                diffuse=Color(0.6, 0.6, 0.6, 1.0),
                specular=Color(0.1, 0.1, 0.1, 1.0),
                shininess=10,
            ),
            'sphere_red': Material(
                ambient=Color(0.15, 0.0, 0.0, 1.0),
                diffuse=Color(0.8, 0.1, 0.1, 1.0),
                specular=Color(0.5, 0.5, 0.5, 1.0),
                shininess=50,
            ),
            'sphere_blue': Material(
                ambient=Color(0.0, 0.05, 0.15, 1.0),
                diffuse=Color(0.2, 0.6, 0.8, 1.0),
                specular=Color(0.8, 0.8, 0.8, 1.0),
                shininess=200,
            ),
            # 플라스틱 느낌
            'sphere_yellow': Material(
                ambient=Color(0.1, 0.1, 0.0, 1.0),
                diffuse=Color(0.9, 0.8, 0.1, 1.0),
                specular=Color(0.3, 0.3, 0.3, 1.0),
                shininess=20,
            ),
            'triangle': Material(
                ambient=Color(0.05, 0.1, 0.05, 1.0),
                diffuse=Color(0.3, 0.8, 0.3, 1.0),
                specular=Color(0.2, 0.2, 0.2, 1.0),
                shininess=5,
            ),
        }

    def _create_floor(self, scene: Scene, materials: dict):
        half_size = self.floor_size / 2.0
        floor = Plane(
            anchor=Vec3(-half_size, self.floor_y, half_size),
            normal=Vec3(0, 1, 0),
            u_dir=Vec3(1, 0, 0),
            u_len=self.floor_size, v_len=self.floor_size,
            material=materials['floor']
        )
        scene.add_object(floor)

    def _create_spheres(self, scene: Scene, materials: dict):
        # 가운데 큰 구체
        scene.add_object(Sphere(Vec3(0, self.floor_y + 1.5, 0), 1.5, materials['sphere_red']))

        # 오른쪽 앞
        scene.add_object(Sphere(Vec3(2.5, self.floor_y + 0.8, 2.0), 0.8, materials['sphere_blue']))

        # 왼쪽 뒤, 살짝 떠 있음
        scene.add_object(Sphere(Vec3(-3.0, self.floor_y + 2.0, -2.0), 1.0, materials['sphere_yellow']))

    def _create_triangle(self, scene: Scene, materials: dict):
        scene.add_object(Triangle(
            Vec3(-4.0, self.floor_y, 1.0),
            Vec3(-2.0, self.floor_y, 3.0),
            Vec3(-3.0, self.floor_y + 2.5, 2.0),
            materials['triangle']
        ))

    def _create_lighting(self, scene: Scene):
        # 오른쪽 위 점광원
        scene.add_light(Light(
            position=Vec3(6.0, 8.0, 6.0),
            ambient=Color(0.2, 0.2, 0.2, 1.0),
            diffuse=Color(1.0, 1.0, 1.0, 1.0),
            specular=Color(1.0, 1.0, 1.0, 1.0),
            intensity=0.7,
        ))

        # 왼쪽 위 면광원 (부드러운 그림자)
        create_area_light(
            scene, center=Vec3(-5.0, 7.0, 3.0),
            u_vec=Vec3(1, 0, 0), v_vec=Vec3(0, 0, 1),
            u_size=self.light_size, v_size=self.light_size,
            n_u=3, n_v=3,
            ambient=Color(0.1, 0.1, 0.1, 1.0),
            diffuse=Color(0.9, 0.9, 1.0, 1.0),
            specular=Color(0.6, 0.6, 0.6, 1.0),
            intensity=0.5,
        )
