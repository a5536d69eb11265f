from typing import List

from core.material import Intersection
from core.scene import Scene, RenderSettings
from core.camera import Camera
from core.shading import PhongShader
from renderers.base_renderer import BaseRenderer, RendererFactory, PixelShader


class CPURenderer(BaseRenderer):
    """CPU 기반 레이캐스팅 렌더러 (Phong 셰이딩 + 그림자)"""

    def __init__(self):
        super().__init__("cpu_raytracer")

    def get_capabilities(self) -> List[str]:
        return [
            "ray_casting",
            "phong_shading",
            "shadows",
            "area_lights",
        ]

    def pixel_shader(self, scene: Scene, camera: Camera, settings: RenderSettings) -> PixelShader:
        shader = PhongShader(scene,
                             shadow_ambient=settings.shadow_ambient,
                             shadow_epsilon=settings.shadow_epsilon)

        def shade(intersection: Intersection):
            return shader.shade(intersection, camera.position)

        return shade


# 렌더러 등록
RendererFactory.register("cpu_raytracer", CPURenderer)
