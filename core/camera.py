from core.math import Vec3


class Camera:
    def __init__(self,
                 position: Vec3,
                 direction: Vec3,
                 up: Vec3,
                 view_plane_distance: float,
                 view_plane_width: float,
                 view_plane_height: float,
                 front_plane_distance: float,
                 back_plane_distance: float):
        if view_plane_width <= 0 or view_plane_height <= 0:
            raise ValueError("View plane size must be positive")
        if view_plane_distance <= 0:
            raise ValueError("View plane distance must be positive")
        if front_plane_distance > back_plane_distance:
            raise ValueError("front_plane_distance must not exceed back_plane_distance")

        self.position = position
        self.direction = direction.normalize()

        # up은 direction에 수직이 되도록 보정 (Gram-Schmidt)
        up_ortho = up - self.direction * up.dot(self.direction)
        if up_ortho.length() < 1e-9:
            raise ValueError("Camera up vector must not be parallel to the direction")
        self.up = up_ortho.normalize()

        self.view_plane_distance = float(view_plane_distance)
        self.view_plane_width = float(view_plane_width)
        self.view_plane_height = float(view_plane_height)
        self.front_plane_distance = float(front_plane_distance)
        self.back_plane_distance = float(back_plane_distance)

    @classmethod
    def look_at(cls,
                lookfrom: Vec3,
                lookat: Vec3,
                vup: Vec3,
                view_plane_width: float,
                view_plane_height: float,
                view_plane_distance: float = 1.0,
                front_plane_distance: float = 0.0,
                back_plane_distance: float = 1000.0) -> "Camera":
        return cls(lookfrom, lookat - lookfrom, vup,
                   view_plane_distance, view_plane_width, view_plane_height,
                   front_plane_distance, back_plane_distance)

    @property
    def right(self) -> Vec3:
        # 화면 가로축. 부호를 바꾸면 이미지가 좌우 반전되므로 up × direction 으로 고정
        return self.up.cross(self.direction)

    def view_plane_point(self, u: float, v: float) -> Vec3:
        """뷰 평면 중심에서 (u, v)만큼 떨어진 월드 좌표"""
        return (self.position +
                self.direction * self.view_plane_distance +
                self.right * u +
                self.up * v)
