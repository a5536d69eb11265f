from core.math import Vec3
from core.color import Color


class Material:
    def __init__(self,
                 ambient: Color = None,
                 diffuse: Color = None,
                 specular: Color = None,
                 shininess: float = 0.0):
        """
        ambient: 주변광 반사 색 (그림자 속에서도 보이는 최소 색)
        diffuse: 확산(Lambert) 반사 색
        specular: Phong 스페큘러 반사 색
        shininess: 스페큘러 지수 (0 이상)
        """
        if shininess < 0:
            raise ValueError(f"Material shininess must be >= 0, got {shininess}")
        # 기본값은 호출마다 새 Color (인스턴스끼리 공유하지 않음)
        self.ambient = ambient if ambient is not None else Color()
        self.diffuse = diffuse if diffuse is not None else Color()
        self.specular = specular if specular is not None else Color()
        self.shininess = float(shininess)

    def __repr__(self):
        return (f"Material(ambient={self.ambient!r}, diffuse={self.diffuse!r}, "
                f"specular={self.specular!r}, shininess={self.shininess})")


class Intersection:
    """광선-물체 교차 결과

    valid: 광선이 수학적으로 표면과 만나는지
    visible: 그 교차점이 질의한 [min_dist, max_dist] 범위 안에 있는지
    valid=False 인 기본값이 "교차 없음" 표식이며, 이때 geometry/position/t는 읽지 않는다.
    """

    def __init__(self, valid=False, visible=False, geometry=None,
                 position: Vec3 = None, t: float = 0.0):
        self.valid = valid
        self.visible = visible
        self.geometry = geometry
        self.position = position
        self.t = t

    @property
    def hit(self) -> bool:
        return self.valid and self.visible

    def __repr__(self):
        if not self.valid:
            return "Intersection(valid=False)"
        return (f"Intersection(visible={self.visible}, t={self.t:.4f}, "
                f"position={self.position!r}, geometry={self.geometry!r})")
