import json
from typing import Any, Dict

from core.math import Vec3
from core.color import Color
from core.material import Material
from core.geometry import Geometry, Plane, Sphere, Triangle
from core.scene import Scene, Light
from core.camera import Camera


class SceneFormatError(ValueError):
    """씬 파일 내용이 잘못되었을 때"""


def _vec3(values) -> Vec3:
    if len(values) != 3:
        raise ValueError(f"expected 3 coordinates, got {len(values)}")
    return Vec3(*values)


def _optional_color(values):
    return None if values is None else Color.from_sequence(values)


class JsonSceneBuilder:
    """JSON 파일에서 씬과 카메라를 읽는 빌더

    {
      "camera": {"position": [0, 0, 5], "look_at": [0, 0, 0], "up": [0, 1, 0],
                 "view_plane_distance": 1, "view_plane_height": 1},
      "materials": {"red": {"ambient": [0.1, 0, 0], "diffuse": [0.8, 0, 0],
                            "specular": [1, 1, 1], "shininess": 50}},
      "geometries": [{"type": "sphere", "center": [0, 0, 0], "radius": 1, "material": "red"}],
      "lights": [{"position": [5, 5, 5], "intensity": 1}]
    }

    색상은 [r, g, b] (불투명) 또는 [r, g, b, a]. camera에서 view_plane_width를
    생략하면 create_camera의 aspect_ratio로 계산한다.
    """

    def __init__(self, document: Dict[str, Any], path: str = "<dict>"):
        if not isinstance(document, dict):
            raise SceneFormatError(f"{path}: top level must be an object")
        self.document = document
        self.path = path

    @classmethod
    def from_file(cls, path: str) -> "JsonSceneBuilder":
        with open(path, encoding="utf-8") as f:
            try:
                document = json.load(f)
            except json.JSONDecodeError as e:
                raise SceneFormatError(f"{path}: invalid JSON: {e}") from e
            except UnicodeDecodeError as e:
                raise SceneFormatError(f"{path}: not valid UTF-8: {e}") from e
        return cls(document, path)

    def _section(self, name: str, kind: type):
        """최상위 섹션을 꺼내고 타입(dict/list)을 확인. 없으면 빈 값"""
        value = self.document.get(name, kind())
        if not isinstance(value, kind):
            raise SceneFormatError(
                f"{self.path}: '{name}' must be a {'list' if kind is list else 'object'}")
        return value

    def build_scene(self) -> Scene:
        scene = Scene()
        materials = self._create_materials()

        for index, entry in enumerate(self._section("geometries", list)):
            scene.add_object(self._create_geometry(index, entry, materials))

        for index, entry in enumerate(self._section("lights", list)):
            scene.add_light(self._create_light(index, entry))

        scene.build_intersector()
        return scene

    def create_camera(self, aspect_ratio: float = 4.0 / 3.0) -> Camera:
        entry = self.document.get("camera")
        if entry is None:
            raise SceneFormatError(f"{self.path}: missing 'camera' section")
        try:
            position = _vec3(entry["position"])
            if "look_at" in entry:
                direction = _vec3(entry["look_at"]) - position
            else:
                direction = _vec3(entry["direction"])
            view_plane_height = float(entry.get("view_plane_height", 1.0))
            view_plane_width = float(entry.get("view_plane_width", view_plane_height * aspect_ratio))
            return Camera(
                position=position,
                direction=direction,
                up=_vec3(entry.get("up", [0, 1, 0])),
                view_plane_distance=float(entry.get("view_plane_distance", 1.0)),
                view_plane_width=view_plane_width,
                view_plane_height=view_plane_height,
                front_plane_distance=float(entry.get("front_plane_distance", 0.0)),
                back_plane_distance=float(entry.get("back_plane_distance", 1000.0)),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise SceneFormatError(f"{self.path}: camera: {self._describe(e)}") from e

    def _create_materials(self) -> Dict[str, Material]:
        materials = {}
        for name, entry in self._section("materials", dict).items():
            try:
                materials[name] = Material(
                    ambient=_optional_color(entry.get("ambient")),
                    diffuse=_optional_color(entry.get("diffuse")),
                    specular=_optional_color(entry.get("specular")),
                    shininess=float(entry.get("shininess", 0.0)),
                )
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                raise SceneFormatError(f"{self.path}: material '{name}': {self._describe(e)}") from e
        return materials

    def _create_geometry(self, index: int, entry: Dict[str, Any], materials: Dict[str, Material]) -> Geometry:
        where = f"{self.path}: geometries[{index}]"
        try:
            kind = entry["type"]
            material = materials[entry["material"]]
        except KeyError as e:
            if isinstance(entry, dict) and "type" in entry and "material" in entry:
                raise SceneFormatError(f"{where}: unknown material '{entry['material']}'") from e
            raise SceneFormatError(f"{where}: {self._describe(e)}") from e
        except TypeError as e:
            raise SceneFormatError(f"{where}: invalid entry: {e}") from e

        try:
            color = Color.from_sequence(entry["color"]) if "color" in entry else None
            if kind == "sphere":
                return Sphere(_vec3(entry["center"]), float(entry["radius"]), material, color)
            if kind == "plane":
                return Plane(
                    anchor=_vec3(entry["anchor"]),
                    normal=_vec3(entry["normal"]),
                    u_dir=_vec3(entry["u_dir"]),
                    u_len=float(entry["u_len"]),
                    v_len=float(entry["v_len"]),
                    material=material,
                    color=color,
                )
            if kind == "triangle":
                v0, v1, v2 = (_vec3(v) for v in entry["vertices"])
                return Triangle(v0, v1, v2, material, color)
        except (KeyError, TypeError, ValueError) as e:
            raise SceneFormatError(f"{where} ({kind}): {self._describe(e)}") from e

        raise SceneFormatError(f"{where}: unknown geometry type '{kind}'")

    def _create_light(self, index: int, entry: Dict[str, Any]) -> Light:
        try:
            return Light(
                position=_vec3(entry["position"]),
                ambient=_optional_color(entry.get("ambient")),
                diffuse=_optional_color(entry.get("diffuse")),
                specular=_optional_color(entry.get("specular")),
                intensity=float(entry.get("intensity", 1.0)),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise SceneFormatError(f"{self.path}: lights[{index}]: {self._describe(e)}") from e

    @staticmethod
    def _describe(e: Exception) -> str:
        if isinstance(e, KeyError):
            return f"missing key {e}"
        return str(e)
