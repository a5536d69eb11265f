import math


class Vec3:
    def __init__(self, x=0.0, y=0.0, z=0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __add__(self, other):
        return Vec3(self.x + other.x,
                    self.y + other.y,
                    self.z + other.z)

    def __sub__(self, other):
        return Vec3(self.x - other.x,
                    self.y - other.y,
                    self.z - other.z)

    def __mul__(self, t):
        return Vec3(self.x * t, self.y * t, self.z * t)

    __rmul__ = __mul__

    def __truediv__(self, t):
        return Vec3(self.x / t, self.y / t, self.z / t)

    def __neg__(self):
        return Vec3(-self.x, -self.y, -self.z)

    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def dot(self, other):
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other):
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length(self):
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self):
        """같은 방향의 단위 벡터를 반환 (길이 0 벡터는 ValueError)"""
        l = self.length()
        if l == 0:
            raise ValueError("Cannot normalize a zero-length vector")
        return self / l

    def reflect(self, normal):
        # r = v - 2 * dot(v, n) * n
        return self - normal * (2 * self.dot(normal))

    def __repr__(self):
        return f"Vec3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"


class Ray:
    """매개변수 광선: origin + t * direction

    방향 벡터는 정규화하지 않고 그대로 보관한다 (길이 0만 아니면 됨).
    t가 거리와 같아지는 것은 방향이 단위 벡터일 때뿐이다 (through 참고).
    """

    def __init__(self, origin: Vec3, direction: Vec3):
        if direction.length() == 0:
            raise ValueError("Ray direction must be a non-zero vector")
        self.origin = origin
        self.direction = direction

    @classmethod
    def through(cls, start: Vec3, end: Vec3) -> "Ray":
        """start에서 end 쪽으로 향하는 광선 (단위 방향)"""
        return cls(start, (end - start).normalize())

    def point_at_parameter(self, t):
        return self.origin + self.direction * t

    def __repr__(self):
        return f"Ray({self.origin!r}, {self.direction!r})"
