import math
from abc import ABC, abstractmethod
from core.math import Vec3, Ray
from core.color import Color
from core.material import Material, Intersection


class Geometry(ABC):
    """광선과 교차할 수 있는 모든 도형의 베이스 클래스

    모든 도형은 같은 규칙을 따른다:
    - 광선과 만나지 않으면 Intersection() (valid=False)
    - 만나면 가장 작은 근 t를 고르고, [min_dist, max_dist] 안이면 visible=True
    """

    def __init__(self, material: Material, color: Color = None):
        self.material = material
        # 셰이딩 없는 모드에서 쓰는 단색 (지정 안 하면 diffuse 색)
        self.color = color if color is not None else material.diffuse

    @abstractmethod
    def intersect(self, ray: Ray, min_dist: float, max_dist: float) -> Intersection:
        pass

    @abstractmethod
    def normal(self, point: Vec3) -> Vec3:
        pass

    def _intersection_at(self, ray: Ray, t: float, min_dist: float, max_dist: float) -> Intersection:
        visible = min_dist <= t <= max_dist
        return Intersection(True, visible, self, ray.point_at_parameter(t), t)


class Sphere(Geometry):
    def __init__(self, center: Vec3, radius: float, material: Material, color: Color = None):
        if radius <= 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        super().__init__(material, color)
        self.center = center
        self.radius = float(radius)

    def intersect(self, ray: Ray, min_dist: float, max_dist: float) -> Intersection:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        b = 2 * ray.direction.dot(oc)
        c = oc.dot(oc) - self.radius * self.radius

        determinant = b * b - 4 * a * c
        if determinant < 0:
            return Intersection()

        sqrt_d = math.sqrt(determinant)
        d1 = (-b + sqrt_d) / (2 * a)
        d2 = (-b - sqrt_d) / (2 * a)
        # 음수여도 항상 작은 근을 고른다. 걸러내는 건 거리 범위의 몫
        return self._intersection_at(ray, min(d1, d2), min_dist, max_dist)

    def normal(self, point: Vec3) -> Vec3:
        return (point - self.center).normalize()

    def __repr__(self):
        return f"Sphere(center={self.center!r}, radius={self.radius})"


class Plane(Geometry):
    def __init__(self,
                 anchor: Vec3,        # 평면 위의 한 점 (corner)
                 normal: Vec3,        # 법선
                 u_dir: Vec3,         # 사각형 u 축 방향
                 u_len: float,        # u 축 길이 (world 단위)
                 v_len: float,        # v 축 길이 (world 단위)
                 material: Material,
                 color: Color = None):
        if u_len <= 0 or v_len <= 0:
            raise ValueError(f"Plane extents must be positive, got {u_len} x {v_len}")
        super().__init__(material, color)
        self.anchor = anchor
        self._normal = normal.normalize()
        self.u_unit = u_dir.normalize()
        if abs(self.u_unit.dot(self._normal)) > 1e-6:
            raise ValueError("Plane u_dir must lie in the plane (perpendicular to the normal)")
        self.v_unit = self._normal.cross(self.u_unit).normalize()
        self.u_extent = float(u_len)
        self.v_extent = float(v_len)

    def intersect(self, ray: Ray, min_dist: float, max_dist: float) -> Intersection:
        denom = self._normal.dot(ray.direction)
        if abs(denom) < 1e-9:
            return Intersection()  # 광선과 평면이 평행

        t = (self.anchor - ray.origin).dot(self._normal) / denom

        P = ray.point_at_parameter(t)
        v2 = P - self.anchor
        u_hit = v2.dot(self.u_unit)
        v_hit = v2.dot(self.v_unit)
        if u_hit < 0 or u_hit > self.u_extent or v_hit < 0 or v_hit > self.v_extent:
            return Intersection()

        return self._intersection_at(ray, t, min_dist, max_dist)

    def normal(self, point: Vec3) -> Vec3:
        return self._normal

    def __repr__(self):
        return f"Plane(anchor={self.anchor!r}, normal={self._normal!r})"


class Triangle(Geometry):
    def __init__(self, v0: Vec3, v1: Vec3, v2: Vec3, material: Material, color: Color = None):
        super().__init__(material, color)
        self.v0 = v0
        self.v1 = v1
        self.v2 = v2
        area_normal = (v1 - v0).cross(v2 - v0)
        if area_normal.length() == 0:
            raise ValueError("Triangle vertices must not be collinear")
        self._normal = area_normal.normalize()

    def intersect(self, ray: Ray, min_dist: float, max_dist: float) -> Intersection:
        # Möller–Trumbore
        edge1 = self.v1 - self.v0
        edge2 = self.v2 - self.v0
        h = ray.direction.cross(edge2)
        a = edge1.dot(h)
        if abs(a) < 1e-12:
            return Intersection()  # 평행

        f = 1.0 / a
        s = ray.origin - self.v0
        u = f * s.dot(h)
        if u < 0.0 or u > 1.0:
            return Intersection()

        q = s.cross(edge1)
        v = f * ray.direction.dot(q)
        if v < 0.0 or u + v > 1.0:
            return Intersection()

        t = f * edge2.dot(q)
        return self._intersection_at(ray, t, min_dist, max_dist)

    def normal(self, point: Vec3) -> Vec3:
        return self._normal

    def __repr__(self):
        return f"Triangle({self.v0!r}, {self.v1!r}, {self.v2!r})"
