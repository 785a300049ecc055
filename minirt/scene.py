"""Scene description: vectors, materials, lights, cameras, shapes and the scene itself."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, List, Optional, Union

from minirt.linkedlist import LinkedList, Node

MAX_CAMERA = 10
MAX_LIGHT = 5
DESCRIPTION_SIZE = 256

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"
WHITE = "\033[37m"

BG_RED = "\033[41m"
BG_GREEN = "\033[42m"
BG_YELLOW = "\033[43m"
BG_BLUE = "\033[44m"
BG_MAGENTA = "\033[45m"
BG_CYAN = "\033[46m"
BG_WHITE = "\033[47m"

BOLD = "\033[1m"
UNDERLINE = "\033[4m"
BLINK = "\033[5m"
REVERSED = "\033[7m"
HIDDEN = "\033[8m"


class SceneLimitError(ValueError):
    """Raised when a scene would hold more cameras or lights than it allows."""


@dataclass(frozen=True)
class Vec:
    """A three-component vector, also used for positions, directions and colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z


class ObjectType(IntEnum):
    """Kind tag of a shape stored in the scene's object list."""

    ERROR = -1
    SPHERE = 0
    PLANE = 1
    CYLINDER = 2
    CONE = 3
    TRIANGLE = 4
    ELLIPSOID = 5


@dataclass(eq=False)
class Material:
    """Surface properties of a shape and where in the scene file it came from."""

    color: Vec = field(default_factory=Vec)
    gloss: float = 0.0
    k_specular: float = 0.0
    k_diffuse: float = 0.0
    checker: int = 0
    mirror: bool = False
    bump: Optional[str] = None
    line: int = 0
    name: Optional[str] = None
    description: str = ""

    def __post_init__(self) -> None:
        if len(self.description) >= DESCRIPTION_SIZE:
            raise ValueError(
                f"description must be shorter than {DESCRIPTION_SIZE} characters"
            )


@dataclass(eq=False)
class Light:
    """A point light with a scaled colour that can be switched on or off."""

    pos: Vec
    intensity: float
    color: Vec
    on: bool = True


@dataclass(eq=False)
class Camera:
    """A viewpoint: position, viewing direction and field of view in degrees."""

    pos: Vec
    dir: Vec
    fov: float
    updated: bool = False


@dataclass(eq=False)
class Sphere:
    center: Vec
    radius: float
    material: Optional[Material] = None


@dataclass(eq=False)
class Plane:
    pos: Vec
    normal: Vec
    material: Optional[Material] = None


@dataclass(eq=False)
class Cylinder:
    center: Vec
    normal: Vec
    radius: float
    height: float
    material: Optional[Material] = None


@dataclass(eq=False)
class Cone:
    vertex: Vec
    normal: Vec
    radius: float
    height: float
    material: Optional[Material] = None


@dataclass(eq=False)
class Triangle:
    a: Vec
    b: Vec
    c: Vec
    normal: Vec
    material: Optional[Material] = None


Shape = Union[Sphere, Plane, Cylinder, Cone, Triangle]


@dataclass(eq=False)
class Intersection:
    """Where a ray met a surface; all fields start at zero."""

    pos: Vec = field(default_factory=Vec)
    normal: Vec = field(default_factory=Vec)
    dist: float = 0.0
    material: Optional[Material] = None


@dataclass(eq=False)
class Pixel:
    """The nearest hit for one screen pixel and the colour each light gives it."""

    obj: Optional[Node] = None
    intersect: Intersection = field(default_factory=Intersection)
    colors: List[Vec] = field(default_factory=lambda: [Vec() for _ in range(MAX_LIGHT)])


class Scene:
    """Cameras, lights, ambient colour and the list of shapes to render."""

    def __init__(
        self,
        ambient: Optional[Vec] = None,
        max_cameras: int = MAX_CAMERA,
        max_lights: int = MAX_LIGHT,
    ) -> None:
        self.cameras: List[Camera] = []
        self.camera_index = 0
        self.lights: List[Light] = []
        self.objects = LinkedList()
        self.ambient = ambient if ambient is not None else Vec()
        self.max_cameras = max_cameras
        self.max_lights = max_lights

    def add_camera(self, camera: Camera) -> int:
        """Add a camera and return its index."""
        if len(self.cameras) >= self.max_cameras:
            raise SceneLimitError(f"a scene holds at most {self.max_cameras} cameras")
        self.cameras.append(camera)
        return len(self.cameras) - 1

    def add_light(self, light: Light) -> int:
        """Add a light and return its index."""
        if len(self.lights) >= self.max_lights:
            raise SceneLimitError(f"a scene holds at most {self.max_lights} lights")
        self.lights.append(light)
        return len(self.lights) - 1

    def add_object(self, kind: ObjectType, shape: Shape) -> Node:
        """Append a shape of the given kind to the object list."""
        kind = ObjectType(kind)
        if kind is ObjectType.ERROR:
            raise ValueError("cannot add an object of kind ERROR")
        return self.objects.append(kind, shape)

    def current_camera(self) -> Optional[Camera]:
        """Return the selected camera, or None when the index selects none."""
        if 0 <= self.camera_index < len(self.cameras):
            return self.cameras[self.camera_index]
        return None