# minirt

Building blocks for a small ray tracer: a scene model, a singly linked list
that holds the scene's shapes, and formatters that turn scenes, materials,
lights and pixels into readable, colourised console text.

## Install

    pip install .

For the tests:

    pip install ".[test]"
    pytest

## Modules

### `minirt.linkedlist`

`Node` is a list cell with `kind`, `data` and `next`. `LinkedList` is a
singly linked list of such cells:

- `LinkedList(items)` builds a list from `(kind, data)` pairs.
- `len()`, truth testing and iteration (over the payloads) work as expected;
  `nodes()` yields the cells themselves.
- `at(index)` returns the cell at a position, or `None`.
- `find(ref, cmp)` returns the first cell whose data compares equal
  (`cmp(data, ref) == 0`) to `ref`, or `None`.
- `foreach(func)` and `foreach_if(func, ref, cmp)` call a function on the
  payloads, the latter only on those that compare equal to `ref`.
- `last()` returns the final cell, or `None`.
- `append(kind, data)` and `push_front(kind, data)` add a cell and return it.
- `pop_front(release)` removes the first cell and returns its data (`None`
  on an empty list), calling `release(data)` when given.
- `clear(release)` empties the list, calling `release(data, kind)` on each
  cell in order when given.

Comparators follow the usual three-way convention: negative, zero or
positive.

### `minirt.listops`

Functions that reshape a `LinkedList` in place:

- `merge(lst, other)` attaches the cells of `other` to the end of `lst` and
  empties `other`.
- `remove_if(lst, ref, cmp, release)` removes every cell whose data compares
  equal to `ref`, calls `release` on each removed payload, and returns the
  number removed.
- `reverse(lst)` relinks the cells in reverse order.
- `reverse_data(lst)` reverses the payloads while leaving cells and kinds in
  place.
- `sort(lst, cmp)` sorts the payloads ascending; kinds stay where they are.
- `sorted_insert(lst, kind, data, cmp)` inserts a new cell into an ascending
  list, after any equal entries, and returns it.
- `sorted_merge(lst, other, cmp)` moves every cell of `other` into the
  ascending `lst` and empties `other`.

### `minirt.scene`

- `Vec` — an immutable, iterable three-component vector used for positions,
  directions and colours.
- `ObjectType` — the kind tag of a shape: `SPHERE`, `PLANE`, `CYLINDER`,
  `CONE`, `TRIANGLE`, `ELLIPSOID`, and `ERROR`.
- `Material` — colour, gloss, specular and diffuse coefficients, checker,
  mirror and bump settings, plus the `line`, `name` and `description` it came
  from. A description of 256 characters or more raises `ValueError`.
- `Light` (with an `on` switch) and `Camera` (position, direction, field of
  view).
- The shapes `Sphere`, `Plane`, `Cylinder`, `Cone` and `Triangle`, each with
  an optional `material`.
- `Intersection` and `Pixel` — the nearest hit for a screen pixel and the
  per-light colours.
- `Scene` — cameras, lights, an ambient colour and a `LinkedList` of shapes.
  `add_camera` and `add_light` return the new index and raise
  `SceneLimitError` (a `ValueError`) past `max_cameras` (default 10) or
  `max_lights` (default 5). `add_object(kind, shape)` appends a shape and
  rejects `ObjectType.ERROR`. `current_camera()` returns the camera selected
  by `camera_index`, or `None`.

The ANSI colour codes used by the formatters (`RED`, `YELLOW`, `BOLD`,
`RESET` and so on) are also defined here.

### `minirt.console`

`format_*` functions return text; they do not print it:

- `format_vec`, `format_vec_inline`
- `format_camera(camera, index)`
- `format_lights`, `format_lights_detail`
- `format_material`, `format_material_inline`
- `format_object`, `format_object_inline` — for a list cell holding a shape;
  kinds with no formatter give empty text, kinds outside 0–8 raise
  `ValueError`
- `format_objects`, `format_objects_detail` — a scene summary
- `format_pixel(pixels, y, x)`, `format_pixel_detail(pixels, y, x)`

## Example

    from minirt.scene import Scene, Camera, Light, Sphere, Material, ObjectType, Vec
    from minirt.console import format_objects_detail

    scene = Scene()
    scene.add_camera(Camera(pos=Vec(0, 0, -20), dir=Vec(0, 0, 1), fov=60))
    scene.add_light(Light(pos=Vec(15, 15, -15), intensity=0.9, color=Vec(1, 1, 1)))
    scene.add_object(
        ObjectType.SPHERE,
        Sphere(center=Vec(5, 0, 0), radius=3, material=Material(color=Vec(1, 0, 0))),
    )
    print(format_objects_detail(scene))

## What this package does not do

It describes and inspects scenes only. It does not read scene files, compute
ray intersections or shading, render images, or open a window, and it has no
command-line program.