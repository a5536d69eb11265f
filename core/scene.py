from typing import List, Optional
from dataclasses import dataclass, field
from core.math import Vec3, Ray
from core.color import Color
from core.material import Intersection
from core.geometry import Geometry
from core.acceleration import Intersector, LinearIntersector


class Light:
    def __init__(self,
                 position: Vec3,
                 ambient: Color = None,
                 diffuse: Color = None,
                 specular: Color = None,
                 intensity: float = 1.0):
        self.position = position
        # 기본값은 조명마다 새 흰색
        self.ambient = ambient if ambient is not None else Color(1.0, 1.0, 1.0, 1.0)
        self.diffuse = diffuse if diffuse is not None else Color(1.0, 1.0, 1.0, 1.0)
        self.specular = specular if specular is not None else Color(1.0, 1.0, 1.0, 1.0)
        self.intensity = float(intensity)

    def __repr__(self):
        return f"Light(position={self.position!r}, intensity={self.intensity})"


@dataclass
class RenderSettings:
    width: int = 800
    height: int = 600
    background: Color = field(default_factory=Color)
    # 그림자 속에서도 조명의 ambient 항을 더할지 (False면 해당 조명 기여 0)
    shadow_ambient: bool = True
    shadow_epsilon: float = 1e-4
    verbose: bool = True

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
        if self.shadow_epsilon < 0:
            raise ValueError(f"shadow_epsilon must be >= 0, got {self.shadow_epsilon}")


class Scene:
    def __init__(self):
        self.geometries: List[Geometry] = []
        self.lights: List[Light] = []
        self.intersector: Optional[Intersector] = None

    def add_object(self, obj: Geometry):
        self.geometries.append(obj)
        self.intersector = None

    def add_light(self, light: Light):
        self.lights.append(light)

    def build_intersector(self) -> Intersector:
        self.intersector = LinearIntersector(self.geometries)
        return self.intersector

    def find_first_intersection(self, ray: Ray, min_dist: float, max_dist: float) -> Intersection:
        if self.intersector is None:
            self.build_intersector()
        return self.intersector.find_first_intersection(ray, min_dist, max_dist)

    def is_lit(self, point: Vec3, light: Light, epsilon: float = 1e-4) -> bool:
        """조명과 point 사이(양 끝 제외)에 가리는 물체가 없으면 True

        조명에서 point 쪽으로 단위 방향 광선을 쏘고 [epsilon, 거리 - epsilon]
        구간만 검사한다. point 자신의 표면(t ≈ 거리)과 조명 뒤쪽의 물체는 제외된다.
        """
        light_to_point = point - light.position
        distance = light_to_point.length()
        if distance <= 2 * epsilon:
            return True

        ray = Ray(light.position, light_to_point / distance)
        intersection = self.find_first_intersection(ray, epsilon, distance - epsilon)
        return not intersection.hit


def create_area_light(scene: Scene,
                      center: Vec3,
                      u_vec: Vec3, v_vec: Vec3,
                      u_size: float, v_size: float,
                      n_u: int, n_v: int,
                      ambient: Color = None,
                      diffuse: Color = None,
                      specular: Color = None,
                      intensity: float = 1.0):
    """면광원 근사: n_u×n_v 격자로 점광원을 배치하고 intensity를 나눠 갖는다"""
    half_u = u_vec.normalize() * (u_size / 2.0)
    half_v = v_vec.normalize() * (v_size / 2.0)
    sample_intensity = intensity / (n_u * n_v)
    for i in range(n_u):
        for j in range(n_v):
            ru = (i + 0.5) / n_u - 0.5
            rv = (j + 0.5) / n_v - 0.5
            sample_pos = center + half_u * (2 * ru) + half_v * (2 * rv)
            scene.add_light(Light(sample_pos, ambient, diffuse, specular, sample_intensity))
