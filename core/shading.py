from core.math import Vec3
from core.color import Color
from core.material import Material, Intersection
from core.scene import Scene, Light


class PhongShader:
    """Phong 로컬 조명 모델 (ambient + diffuse + specular, 그림자 검사 포함)

    shadow_ambient=True: 가려진 조명도 ambient 항은 기여한다.
    shadow_ambient=False: 가려진 조명은 아무것도 기여하지 않는다.

    모든 조명의 합이 완전히 0이면 재질의 ambient 색을 그대로 쓴다 (ambient floor).
    """

    def __init__(self, scene: Scene, shadow_ambient: bool = True, shadow_epsilon: float = 1e-4):
        self.scene = scene
        self.shadow_ambient = shadow_ambient
        self.shadow_epsilon = shadow_epsilon

    def shade(self, intersection: Intersection, eye: Vec3) -> Color:
        geometry = intersection.geometry
        material = geometry.material
        N = geometry.normal(intersection.position)
        E = (eye - intersection.position).normalize()
        # 뒷면이 보이면 법선을 카메라 쪽으로 뒤집는다
        if N.dot(E) < 0:
            N = -N

        color = Color()
        for light in self.scene.lights:
            color += self.shade_light(intersection.position, light, N, E, material)

        if color.is_black():
            return material.ambient
        return color

    def shade_light(self, point: Vec3, light: Light, N: Vec3, E: Vec3, material: Material) -> Color:
        if not self.scene.is_lit(point, light, self.shadow_epsilon):
            if self.shadow_ambient:
                return material.ambient * light.ambient * light.intensity
            return Color()

        T = (light.position - point).normalize()
        # R = 2 (N·T) N - T
        R = (-T).reflect(N).normalize()

        color = material.ambient * light.ambient
        n_dot_t = N.dot(T)
        if n_dot_t > 0:
            color += material.diffuse * light.diffuse * n_dot_t
        e_dot_r = E.dot(R)
        if e_dot_r > 0:
            color += material.specular * light.specular * (e_dot_r ** material.shininess)

        return color * light.intensity
