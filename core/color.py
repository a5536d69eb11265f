class Color:
    """RGBA 색상 (채널 값은 보통 0~1 범위의 float)

    Color()는 알파까지 0인 검은색이며 "기여 없음"을 뜻한다.
    """

    def __init__(self, red=0.0, green=0.0, blue=0.0, alpha=0.0):
        self.red = float(red)
        self.green = float(green)
        self.blue = float(blue)
        self.alpha = float(alpha)

    def __add__(self, other):
        return Color(self.red + other.red,
                     self.green + other.green,
                     self.blue + other.blue,
                     self.alpha + other.alpha)

    def __mul__(self, t):
        # 스칼라 곱 또는 채널별 곱
        if isinstance(t, Color):
            return Color(self.red * t.red,
                         self.green * t.green,
                         self.blue * t.blue,
                         self.alpha * t.alpha)
        return Color(self.red * t, self.green * t, self.blue * t, self.alpha * t)

    __rmul__ = __mul__

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self):
        return hash(self.as_tuple())

    def is_black(self) -> bool:
        return self.red == 0 and self.green == 0 and self.blue == 0 and self.alpha == 0

    def as_tuple(self):
        return self.red, self.green, self.blue, self.alpha

    def clamped(self) -> "Color":
        return Color(*(max(0.0, min(1.0, c)) for c in self.as_tuple()))

    def to_rgba8(self):
        return tuple(int(round(c * 255)) for c in self.clamped().as_tuple())

    @classmethod
    def from_sequence(cls, values) -> "Color":
        """채널 3개(불투명) 또는 4개로 색상 생성"""
        values = list(values)
        if len(values) == 3:
            values.append(1.0)
        if len(values) != 4:
            raise ValueError(f"Color needs 3 or 4 channels, got {len(values)}")
        return cls(*values)

    def __repr__(self):
        return f"Color({self.red:.3f}, {self.green:.3f}, {self.blue:.3f}, {self.alpha:.3f})"


WHITE = Color(1.0, 1.0, 1.0, 1.0)
