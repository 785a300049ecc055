"""Human-readable dumps of scene data: vectors, cameras, lights, materials, shapes and pixels."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Optional, Sequence

from minirt.linkedlist import Node
from minirt.scene import (
    BLUE,
    BOLD,
    CYAN,
    RED,
    RESET,
    REVERSED,
    UNDERLINE,
    YELLOW,
    Camera,
    Cone,
    Cylinder,
    Light,
    Material,
    ObjectType,
    Pixel,
    Plane,
    Scene,
    Sphere,
    Triangle,
    Vec,
)

_RULE = "----------------------------------\n"
_OBJ_HEADER = YELLOW + BOLD + "---- obj -------------------------\n" + RESET
_YELLOW_RULE = YELLOW + BOLD + _RULE + RESET
_CYAN_RULE = CYAN + BOLD + _RULE + RESET
# The dispatch tables cover kinds 0 through 8; kinds without a formatter print nothing.
_MAX_KIND = 8


def _title(text: str) -> str:
    return UNDERLINE + BLUE + BOLD + text + RESET + "\n"


def _size_line(radius: float, height: float) -> str:
    return f"r:  {radius:8.2f},  h:  {height:8.2f}\n"


def format_vec(name: str, vec: Vec) -> str:
    """Return a titled block with one line per component."""
    return (
        _title(name)
        + f"x:  {vec.x:8.2f}\n"
        + f"y:  {vec.y:8.2f}\n"
        + f"z:  {vec.z:8.2f}\n"
        + "\n"
    )


def format_vec_inline(name: str, vec: Vec) -> str:
    """Return the vector on a single line after its name."""
    return f"{name}: {vec.x:8.2f}  {vec.y:8.2f}  {vec.z:8.2f}\n"


def format_camera(camera: Camera, index: int) -> str:
    """Return a framed summary of one camera."""
    return (
        YELLOW + BOLD + f"--- camera [{index}] -------------------\n" + RESET
        + format_vec_inline("pos", camera.pos)
        + format_vec_inline("dir", camera.dir)
        + f"fov: {camera.fov:.2f}\n"
        + _YELLOW_RULE
    )


def _light_label(index: int, light: Light) -> str:
    if light.on:
        return YELLOW + REVERSED + f"[{index}]" + RESET + " "
    return f"[{index}] "


def format_lights(lights: Optional[Iterable[Light]]) -> str:
    """Return one label per light, highlighted when the light is on."""
    if lights is None:
        return ""
    return "".join(_light_label(i, light) for i, light in enumerate(lights)) + "\n"


def format_lights_detail(lights: Optional[Iterable[Light]]) -> str:
    """Return each light's label followed by its position and colour."""
    if lights is None:
        return ""
    return "".join(
        _light_label(i, light)
        + format_vec_inline("posture", light.pos)
        + format_vec_inline("    color", light.color)
        for i, light in enumerate(lights)
    )


def format_material(material: Optional[Material]) -> str:
    """Return every property of a material."""
    if material is None:
        return "Material is NULL\n"
    text = (
        UNDERLINE + RED + BOLD + "material" + RESET + "\n"
        + format_vec_inline("color", material.color)
        + f"gloss: {material.gloss:.2f}\n"
        + f"k_specular: {material.k_specular:.2f}\n"
        + f"k_diffuse: {material.k_diffuse:.2f}\n"
        + f"line: {material.line}\n"
    )
    if material.name:
        text += f"name: {material.name}\n"
    if material.description:
        text += f"description: {material.description}\n"
    return text


def format_material_inline(material: Optional[Material]) -> str:
    """Return the material's source line and name on one line."""
    if material is None:
        return "Material is NULL\n"
    text = f"line: {material.line}  "
    if material.name:
        text += f"name: {material.name}"
    return text + "\n"


def _sphere(sp: Sphere) -> str:
    return format_vec("sphere", sp.center) + f"r:  {sp.radius:8.2f}\n" + format_material(sp.material)


def _plane(pl: Plane) -> str:
    return (
        format_vec("plane normal", pl.normal)
        + format_vec("plane center", pl.pos)
        + format_material(pl.material)
    )


def _cylinder(cy: Cylinder) -> str:
    return (
        format_vec("cylinder normal", cy.normal)
        + format_vec("cylinder center", cy.center)
        + _size_line(cy.radius, cy.height)
        + format_material(cy.material)
    )


def _cone(cone: Cone) -> str:
    return (
        format_vec("cone normal", cone.normal)
        + format_vec("cone vertex", cone.vertex)
        + _size_line(cone.radius, cone.height)
        + format_material(cone.material)
    )


def _triangle(tr: Triangle) -> str:
    return format_vec("triangle normal", tr.normal) + format_material(tr.material)


def _sphere_inline(sp: Sphere) -> str:
    return (
        _title("sphere")
        + format_vec_inline("center", sp.center)
        + f"r:  {sp.radius:8.2f}\n"
        + format_material_inline(sp.material)
    )


def _plane_inline(pl: Plane) -> str:
    return (
        _title("plane")
        + format_vec_inline("normal", pl.normal)
        + format_vec_inline("center", pl.pos)
        + format_material_inline(pl.material)
    )


def _cylinder_inline(cy: Cylinder) -> str:
    return (
        _title("cylinder")
        + format_vec_inline("normal", cy.normal)
        + format_vec_inline("center", cy.center)
        + _size_line(cy.radius, cy.height)
        + format_material_inline(cy.material)
    )


def _cone_inline(cone: Cone) -> str:
    return (
        _title("cone")
        + format_vec_inline("normal", cone.normal)
        + format_vec_inline("vertex", cone.vertex)
        + _size_line(cone.radius, cone.height)
        + format_material_inline(cone.material)
    )


def _triangle_inline(tr: Triangle) -> str:
    return (
        _title("triangle")
        + format_vec_inline("normal", tr.normal)
        + format_material_inline(tr.material)
    )


_DETAIL: Dict[int, Callable] = {
    ObjectType.SPHERE: _sphere,
    ObjectType.PLANE: _plane,
    ObjectType.CYLINDER: _cylinder,
    ObjectType.CONE: _cone,
    ObjectType.TRIANGLE: _triangle,
}

_INLINE: Dict[int, Callable] = {
    ObjectType.SPHERE: _sphere_inline,
    ObjectType.PLANE: _plane_inline,
    ObjectType.CYLINDER: _cylinder_inline,
    ObjectType.CONE: _cone_inline,
    ObjectType.TRIANGLE: _triangle_inline,
}


def _dispatch(table: Dict[int, Callable], node: Node) -> str:
    kind = int(node.kind)
    if not 0 <= kind <= _MAX_KIND:
        raise ValueError(f"no formatter for object kind {kind}")
    formatter = table.get(kind)
    return formatter(node.data) if formatter is not None else ""


def format_object(node: Optional[Node]) -> str:
    """Return a detailed dump of the shape held by a list cell."""
    if node is None:
        return RED + "object None" + RESET + "\n"
    return _dispatch(_DETAIL, node) + "\n"


def format_object_inline(node: Optional[Node]) -> str:
    """Return a compact dump of the shape held by a list cell."""
    if node is None:
        return RED + "object None" + RESET + "\n"
    return _dispatch(_INLINE, node)


def format_objects(scene: Optional[Scene]) -> str:
    """Return counts and the ambient colour of a scene."""
    if scene is None:
        return ""
    return (
        _OBJ_HEADER
        + f"num_of_objs  : {len(scene.objects)}\n"
        + f"num_of_camera: {len(scene.cameras)}\n"
        + f"id_of_camera : {scene.camera_index}\n"
        + format_vec_inline("ambient:", scene.ambient)
        + f"num_of_light : {len(scene.lights)}\n"
        + _YELLOW_RULE
        + "\n"
    )


def format_objects_detail(scene: Optional[Scene]) -> str:
    """Return the scene summary with every shape and light listed."""
    if scene is None:
        return ""
    shapes = "".join(format_object_inline(node) + "\n" for node in scene.objects.nodes())
    return (
        _OBJ_HEADER
        + f"num_of_objs  : {len(scene.objects)}\n"
        + shapes
        + f"num_of_camera: {len(scene.cameras)}\n"
        + f"id_of_camera : {scene.camera_index}\n"
        + format_vec_inline("ambient:", scene.ambient)
        + f"num_of_light : {len(scene.lights)}\n"
        + format_lights_detail(scene.lights)
        + _YELLOW_RULE
        + "\n"
    )


def _pixel_header(y: int, x: int) -> str:
    return CYAN + BOLD + f"-- ({y:04d}, {x:04d}) ------------------\n" + RESET


def format_pixel(pixels: Sequence[Sequence[Pixel]], y: int, x: int) -> str:
    """Return the shape hit at pixel (y, x) and its distance."""
    pixel = pixels[y][x]
    text = _pixel_header(y, x)
    if pixel.obj is not None:
        text += format_object_inline(pixel.obj)
        text += f"dist :  {pixel.intersect.dist:f}\n"
    return text + _CYAN_RULE + "\n"


def format_pixel_detail(pixels: Sequence[Sequence[Pixel]], y: int, x: int) -> str:
    """Return the shape hit at pixel (y, x) with the full intersection."""
    pixel = pixels[y][x]
    text = _pixel_header(y, x)
    if pixel.obj is not None:
        text += format_object(pixel.obj)
        text += UNDERLINE + RED + CYAN + "intersection" + RESET + "\n"
        text += f"dist :  {pixel.intersect.dist:f}\n"
        text += format_vec_inline("pos", pixel.intersect.pos)
        text += format_vec_inline("norm", pixel.intersect.normal)
    return text + _CYAN_RULE + "\n"