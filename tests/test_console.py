import pytest

from minirt import console
from minirt.linkedlist import Node
from minirt.scene import (
    BLUE,
    BOLD,
    RED,
    RESET,
    REVERSED,
    UNDERLINE,
    YELLOW,
    Camera,
    Cone,
    Intersection,
    Light,
    Material,
    ObjectType,
    Pixel,
    Scene,
    Sphere,
    Vec,
)


def _scene():
    scene = Scene(ambient=Vec(0.0, 0.5, 1.0))
    scene.add_camera(Camera(Vec(0, 0, 0), Vec(0, 0, 1), 70))
    scene.add_object(ObjectType.SPHERE, Sphere(Vec(1, 2, 3), 2.0, Material(line=4, name="red")))
    scene.add_object(ObjectType.CONE, Cone(Vec(0, 0, 0), Vec(0, 1, 0), 1.0, 3.0))
    return scene


def test_vec_inline_exact():
    assert console.format_vec_inline("pos", Vec(1.5, -2.0, 3.25)) == (
        "pos:     1.50     -2.00      3.25\n"
    )


def test_vec_block_layout():
    text = console.format_vec("center", Vec(1, 2, 3))
    assert text.startswith(UNDERLINE + BLUE + BOLD + "center" + RESET + "\n")
    assert text.endswith("\n\n")
    lines = text.split("\n")
    assert [line[:2] for line in lines[1:4]] == ["x:", "y:", "z:"]
    assert "1.00" in lines[1] and "2.00" in lines[2] and "3.00" in lines[3]


def test_material_none():
    assert console.format_material(None) == "Material is NULL\n"
    assert console.format_material_inline(None) == "Material is NULL\n"


def test_material_optional_fields():
    plain = console.format_material(Material(line=3))
    assert "name:" not in plain and "description:" not in plain
    assert "line: 3\n" in plain
    full = console.format_material(Material(line=3, name="steel", description="shiny"))
    assert "name: steel\n" in full
    assert "description: shiny\n" in full


def test_material_inline():
    assert console.format_material_inline(Material(line=7, name="glass")) == "line: 7  name: glass\n"
    assert console.format_material_inline(Material(line=7)) == "line: 7  \n"


def test_object_none():
    expected = RED + "object None" + RESET + "\n"
    assert console.format_object(None) == expected
    assert console.format_object_inline(None) == expected


def test_unformatted_kind_prints_nothing():
    node = Node(ObjectType.ELLIPSOID, object())
    assert console.format_object(node) == "\n"
    assert console.format_object_inline(node) == ""


def test_error_kind_rejected():
    node = Node(ObjectType.ERROR, object())
    with pytest.raises(ValueError):
        console.format_object(node)
    with pytest.raises(ValueError):
        console.format_object_inline(node)


def test_sphere_inline_contents():
    node = Node(ObjectType.SPHERE, Sphere(Vec(1, 2, 3), 2.0, Material(line=5, name="red")))
    text = console.format_object_inline(node)
    assert text.startswith(UNDERLINE + BLUE + BOLD + "sphere" + RESET + "\n")
    assert console.format_vec_inline("center", Vec(1, 2, 3)) in text
    assert text.endswith("line: 5  name: red\n")


def test_sphere_detail_contents():
    node = Node(ObjectType.SPHERE, Sphere(Vec(1, 2, 3), 2.0))
    text = console.format_object(node)
    assert text.startswith(console.format_vec("sphere", Vec(1, 2, 3)))
    assert text.endswith("Material is NULL\n\n")


def test_cone_lines():
    node = Node(ObjectType.CONE, Cone(Vec(0, 0, 0), Vec(0, 1, 0), 1.0, 3.0))
    inline = console.format_object_inline(node)
    assert console.format_vec_inline("vertex", Vec(0, 0, 0)) in inline
    assert console.format_vec_inline("normal", Vec(0, 1, 0)) in inline
    detail = console.format_object(node)
    assert console.format_vec("cone normal", Vec(0, 1, 0)) in detail


def test_lights_labels():
    lights = [Light(Vec(), 0.5, Vec(1, 1, 1), on=True), Light(Vec(), 0.5, Vec(1, 1, 1), on=False)]
    assert console.format_lights(lights) == YELLOW + REVERSED + "[0]" + RESET + " " + "[1] " + "\n"
    assert console.format_lights(None) == ""


def test_lights_detail():
    light = Light(Vec(1, 2, 3), 0.5, Vec(0.1, 0.2, 0.3), on=False)
    text = console.format_lights_detail([light])
    assert text == (
        "[0] "
        + console.format_vec_inline("posture", Vec(1, 2, 3))
        + console.format_vec_inline("    color", Vec(0.1, 0.2, 0.3))
    )


def test_camera_frame():
    text = console.format_camera(Camera(Vec(0, 0, 0), Vec(0, 0, 1), 70), 2)
    assert "--- camera [2] ---" in text
    assert "fov: 70.00\n" in text
    assert console.format_vec_inline("dir", Vec(0, 0, 1)) in text


def test_objects_summary():
    text = console.format_objects(_scene())
    for line in ("num_of_objs  : 2", "num_of_camera: 1", "id_of_camera : 0", "num_of_light : 0"):
        assert line + "\n" in text
    assert console.format_vec_inline("ambient:", Vec(0.0, 0.5, 1.0)) in text
    assert console.format_objects(None) == ""


def test_objects_detail_lists_shapes_in_order():
    scene = _scene()
    text = console.format_objects_detail(scene)
    nodes = list(scene.objects.nodes())
    first = text.index(console.format_object_inline(nodes[0]))
    second = text.index(console.format_object_inline(nodes[1]))
    assert first < second < text.index("num_of_camera")


def test_pixel_without_hit():
    pixels = [[Pixel(), Pixel()], [Pixel(), Pixel()], [Pixel(), Pixel()]]
    text = console.format_pixel(pixels, 2, 1)
    assert "-- (0002, 0001) ---" in text
    assert "dist" not in text
    assert console.format_pixel_detail(pixels, 2, 1) == text


def test_pixel_with_hit():
    scene = _scene()
    node = scene.objects.at(0)
    pixels = [[Pixel(obj=node, intersect=Intersection(pos=Vec(1, 0, 0), dist=1.5))]]
    text = console.format_pixel(pixels, 0, 0)
    assert console.format_object_inline(node) in text
    assert "dist :  1.500000\n" in text
    detail = console.format_pixel_detail(pixels, 0, 0)
    assert console.format_object(node) in detail
    assert console.format_vec_inline("pos", Vec(1, 0, 0)) in detail
    assert "intersection" in detail