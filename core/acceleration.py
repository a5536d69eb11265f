from abc import ABC, abstractmethod
from typing import List, Sequence
from core.math import Ray
from core.material import Intersection
from core.geometry import Geometry


class Intersector(ABC):
    """도형 집합에 대해 "가장 가까운 보이는 교차점"을 찾는 질의 인터페이스

    렌더러와 그림자 검사는 이 계약에만 의존하므로 BVH 같은 가속 구조로
    바꿔 끼워도 호출하는 쪽은 그대로다.
    """

    @abstractmethod
    def find_first_intersection(self, ray: Ray, min_dist: float, max_dist: float) -> Intersection:
        pass


class LinearIntersector(Intersector):
    """모든 도형을 순서대로 검사하는 선형 탐색 (O(도형 수))"""

    def __init__(self, geometries: Sequence[Geometry]):
        self.geometries: List[Geometry] = list(geometries)

    def find_first_intersection(self, ray: Ray, min_dist: float, max_dist: float) -> Intersection:
        intersection = Intersection()

        for geometry in self.geometries:
            intr = geometry.intersect(ray, min_dist, max_dist)
            if not intr.hit:
                continue
            # t가 같으면 먼저 추가된 도형을 유지
            if not intersection.hit or intr.t < intersection.t:
                intersection = intr

        return intersection
