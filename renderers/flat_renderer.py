from typing import List

from core.material import Intersection
from core.scene import Scene, RenderSettings
from core.camera import Camera
from renderers.base_renderer import BaseRenderer, RendererFactory, PixelShader


class FlatRenderer(BaseRenderer):
    """셰이딩 없이 도형의 단색만 칠하는 렌더러 (가시성 디버깅용)"""

    def __init__(self):
        super().__init__("flat")

    def get_capabilities(self) -> List[str]:
        return ["ray_casting"]

    def pixel_shader(self, scene: Scene, camera: Camera, settings: RenderSettings) -> PixelShader:
        def shade(intersection: Intersection):
            return intersection.geometry.color

        return shade


# 렌더러 등록
RendererFactory.register("flat", FlatRenderer)
