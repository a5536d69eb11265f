import time
from abc import ABC, abstractmethod
from typing import Callable, List
from core.math import Ray
from core.color import Color
from core.material import Intersection
from core.image import Image
from core.scene import Scene, RenderSettings
from core.camera import Camera

PixelShader = Callable[[Intersection], Color]


def image_to_view_plane(n: int, img_size: int, view_plane_size: float) -> float:
    """픽셀 인덱스를 뷰 평면 중심 기준 좌표로 변환"""
    u = n * view_plane_size / img_size
    u -= view_plane_size / 2
    return u


class BaseRenderer(ABC):
    """모든 렌더러가 구현해야 하는 베이스 클래스

    픽셀마다 광선 하나를 쏘는 루프는 여기서 공통으로 처리하고,
    교차점의 색을 정하는 방법만 하위 클래스가 정한다.
    """

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def pixel_shader(self, scene: Scene, camera: Camera, settings: RenderSettings) -> PixelShader:
        """보이는 교차점을 색으로 바꾸는 함수를 반환"""
        pass

    @abstractmethod
    def get_capabilities(self) -> List[str]:
        """이 렌더러가 지원하는 기능들을 반환"""
        pass

    def get_name(self) -> str:
        return self.name

    def supports(self, feature: str) -> bool:
        """특정 기능을 지원하는지 확인"""
        return feature in self.get_capabilities()

    def render(self, scene: Scene, camera: Camera, settings: RenderSettings) -> Image:
        """장면을 렌더링하여 Image를 반환"""
        start_time = time.time()
        if settings.verbose:
            print(f"{self.name} 렌더링 시작: {settings.width}x{settings.height}, "
                  f"도형 {len(scene.geometries)}개, 조명 {len(scene.lights)}개")

        shade = self.pixel_shader(scene, camera, settings)
        image = Image(settings.width, settings.height)

        for j in range(settings.height):
            v = image_to_view_plane(j, settings.height, camera.view_plane_height)
            for i in range(settings.width):
                u = image_to_view_plane(i, settings.width, camera.view_plane_width)
                ray = Ray.through(camera.position, camera.view_plane_point(u, v))

                intersection = scene.find_first_intersection(
                    ray, camera.front_plane_distance, camera.back_plane_distance)
                image.set_pixel(i, j, shade(intersection) if intersection.hit else settings.background)

            if settings.verbose and j % 50 == 0:
                print(f"남은 행: {settings.height - j}")

        if settings.verbose:
            elapsed = time.time() - start_time
            minutes = int(elapsed // 60)
            seconds = elapsed % 60
            print(f"{self.name} 렌더링 완료: {minutes}분 {seconds:.2f}초")

        return image


class RendererFactory:
    """렌더러 팩토리 클래스"""

    _renderers = {}

    @classmethod
    def register(cls, name: str, renderer_class):
        """새로운 렌더러를 등록"""
        cls._renderers[name] = renderer_class

    @classmethod
    def create(cls, name: str, **kwargs) -> BaseRenderer:
        """등록된 렌더러를 생성"""
        if name not in cls._renderers:
            raise ValueError(f"Unknown renderer: {name}")
        return cls._renderers[name](**kwargs)

    @classmethod
    def list_available(cls) -> List[str]:
        """사용 가능한 렌더러 목록 반환"""
        return list(cls._renderers.keys())
