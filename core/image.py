import os
import numpy as np
from PIL import Image as PILImage
from core.color import Color

# 알파 채널을 저장할 수 없는 포맷은 RGB로 변환해서 저장
_RGB_ONLY_EXTENSIONS = {".jpg", ".jpeg", ".ppm"}


class Image:
    """width × height 색상 격자 (float RGBA)

    (i, j)는 (열, 아래에서부터의 행)이다. 파일로 저장할 때 행을 뒤집어서
    카메라 up 방향이 이미지 위쪽이 되도록 한다.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((width, height, 4), dtype=np.float64)

    def set_pixel(self, i: int, j: int, color: Color):
        self.pixels[i, j] = color.as_tuple()

    def get_pixel(self, i: int, j: int) -> Color:
        return Color(*self.pixels[i, j])

    def to_pil(self) -> PILImage.Image:
        rgba = np.clip(self.pixels, 0.0, 1.0) * 255.0
        rgba = np.rint(rgba).astype(np.uint8)
        # (width, height, 4) → (height, width, 4), 위아래 반전
        rgba = np.ascontiguousarray(np.transpose(rgba, (1, 0, 2))[::-1])
        return PILImage.fromarray(rgba)

    def save(self, filename: str):
        image = self.to_pil()
        if os.path.splitext(filename)[1].lower() in _RGB_ONLY_EXTENSIONS:
            image = image.convert("RGB")
        image.save(filename)

    def show(self):
        self.to_pil().show()
