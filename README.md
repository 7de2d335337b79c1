# sumkit

sumkit is a small 3D toolkit for Python with no dependencies. It provides the math types, mesh and model data structures, plain-text model file formats, a height-field terrain, a debug-draw vertex batcher, and keyboard/mouse state tracking.

## Modules

- `sumkit.scalar`
  - `clamp`, `lerp` and `sqr`.
  - Angle constants: `PI`, `HALF_PI`, `TWO_PI`, `DEG_TO_RAD`, `RAD_TO_DEG`.
  - `RangeInt`, with `random` for `[low, high)` and `random_inclusive` for `[low, high]`.
  - `Range`, whose `random` picks a value between `low` and `high`.
  - Each random method takes an optional `random.Random`. Without one, it uses the `random` module.
- `sumkit.vector`
  - Frozen `Vector2`, `Vector3` and `Vector4` dataclasses that support `+`, `-`, negation, and `*` and `/` by a number.
  - `Vector4` also exposes `r`, `g`, `b` and `a`.
  - Helpers: `dot`, `cross`, `magnitude`, `magnitude_sqr`, `distance`, `distance_sqr` and `normalize`. `normalize` raises `ZeroDivisionError` for a zero vector.
- `sumkit.matrix`
  - `Matrix4` is a frozen row-major 4x4 matrix for row vectors. The default instance is the identity.
  - `@` is the matrix product. `*` and `/` scale by a number.
  - Constructors: `translation`, `rotation_x`, `rotation_y`, `rotation_z`, `rotation_axis`, `rotation_quaternion`, `scaling` and `from_values`.
  - Helpers: `transform_coord` (applies translation), `transform_normal` (ignores it), `transpose`, `get_translation`, `get_right`, `get_up`, `get_look` and `get_scale`.
- `sumkit.quaternion`
  - `Quaternion` with `conjugate`, `inverse`, `magnitude`, `magnitude_squared`, `normalized` and `dot`.
  - Constructors: `from_axis_angle`, `from_yaw_pitch_roll` and `from_rotation_matrix`.
  - Interpolation: `lerp` (not normalized) and `slerp` (shorter arc, normalized).
- `sumkit.colors`
  - `NAMED_COLORS` maps colour names to RGBA `Vector4` values. It is read-only.
  - The constants `BLACK`, `WHITE`, `RED`, `GREEN`, `BLUE` and `TRANSPARENT` are provided.
  - `color_by_name` ignores case, spaces and underscores, and raises `KeyError` for an unknown name.
- `sumkit.transform`
  - `Transform` holds a position, a rotation and a scale.
  - `matrix()` returns scale, then rotation, then translation as one matrix.
- `sumkit.mesh`
  - `VertexFormat` flags.
  - Vertex types `VertexP`, `VertexPC` and `VertexPX`.
  - The full `Vertex`, which has normal, tangent, UV and four bone indices and weights.
  - `Mesh`, which holds vertices and indices.
- `sumkit.model`
  - `Model`, `MeshData`, `MaterialData`, `Material`, `Skeleton`, `Bone`, `Keyframe`, `Animation`, `AnimationClip` and `DirectionalLight`.
  - `AnimationBuilder` chains `add_position_key`, `add_rotation_key` and `add_scale_key`. `build()` returns the collected animation, with `duration` set to the latest key time, and then starts a fresh one.
- `sumkit.modelio`
  - Reads and writes the plain-text `.model`, `.material`, `.skeleton` and `.animset` formats.
  - Functions: `save_model`/`load_model`, `save_material`/`load_material`, `save_skeleton`/`load_skeleton`, `save_animations`/`load_animations`, and `write_animation`/`read_animation` for a single animation on a text stream.
  - The save functions replace the file extension with the format's own. They return the written path, or `None` when there is nothing to write.
  - `load_model` opens the path exactly as given. The other loaders replace the extension first.
  - `load_material` resolves texture names against the directory of the material file.
  - `load_animations` appends clips to the model.
  - Malformed input raises `ModelIOError`, which is a `ValueError`.
- `sumkit.terrain`
  - `Terrain.from_heightmap` builds a square grid from raw 8-bit height samples. The side length is the integer square root of the data length. `Terrain.from_file` does the same from a file.
  - `height_at` interpolates the ground height and returns `0.0` outside the grid.
  - `width` and `length` give the grid extents.
- `sumkit.simpledraw`
  - `SimpleDraw(max_vertex_count)` collects coloured `VertexPC` line pairs and triangle triples.
  - Shapes: lines, faces, wire and filled boxes, spheres, ovals, ellipsoids, ground circles, cones, a ground grid, and a transform's axes.
  - Primitives that would exceed the cap are dropped.
  - `flush()` returns a `DrawBatch(lines, faces)` and empties the batcher.
- `sumkit.input`
  - `KeyCode` and `MouseButton`.
  - `InputSystem` tracks current, previous and newly pressed state. You feed it events with `key_down`, `key_up`, `mouse_button_down`, `mouse_button_up`, `mouse_wheel`, `mouse_move` and `activate`, and call `update()` once per frame.
  - State queries: `is_key_down`, `is_key_pressed`, `is_mouse_down` and `is_mouse_pressed`.
  - Mouse properties: `mouse_move_x`, `mouse_move_y`, `mouse_move_z`, `mouse_screen_x` and `mouse_screen_y`.
  - Edge flags: `mouse_left_edge`, `mouse_right_edge`, `mouse_top_edge` and `mouse_bottom_edge`.
- `sumkit.postprocess`
  - `PostProcessingEffect` holds a `PostProcessMode`, the per-mode tuning values and four texture slots.
  - `build_data(screen_width, screen_height)` returns the `PostProcessData` for the current mode.
  - `set_texture` raises `IndexError` for a bad slot.

## Install

```
pip install .
```

## Examples

Place a point with a transform:

```python
import math
from sumkit.matrix import transform_coord
from sumkit.quaternion import Quaternion
from sumkit.transform import Transform
from sumkit.vector import Vector3

t = Transform(
    position=Vector3(1.0, 2.0, 3.0),
    rotation=Quaternion.from_axis_angle(Vector3(0.0, 1.0, 0.0), math.pi / 2),
)
world = t.matrix()
print(transform_coord(Vector3(1.0, 0.0, 0.0), world))
```

Round-trip a model through the text format:

```python
from sumkit.mesh import Mesh, Vertex
from sumkit.model import MeshData, Model
from sumkit.modelio import load_model, save_model
from sumkit.vector import Vector3

model = Model(mesh_data=[MeshData(Mesh(
    [Vertex(position=Vector3(0, 0, 0)), Vertex(position=Vector3(1, 0, 0)),
     Vertex(position=Vector3(0, 1, 0))],
    [0, 1, 2],
))])
path = save_model("triangle", model)   # writes triangle.model
loaded = load_model(path, Model())
```

Sample a terrain and track input:

```python
from sumkit.input import InputSystem, KeyCode
from sumkit.terrain import Terrain
from sumkit.vector import Vector3

terrain = Terrain.from_heightmap(bytes(range(16)), max_height=10.0, tile_count=1.0)
print(terrain.height_at(Vector3(1.5, 0.0, 1.5)))

keys = InputSystem()
keys.key_down(KeyCode.W)
keys.update()
print(keys.is_key_pressed(KeyCode.W))
```

## What it does not do

sumkit does no rendering and owns no window, GPU device, shaders or textures.

- `SimpleDraw` and `PostProcessingEffect` only produce the vertices and parameter values that a renderer would consume.
- `InputSystem` does not read the keyboard or mouse itself. Your windowing code must pass events to it.
- `Animation` only stores keyframes. Nothing in the package samples it at a point in time or plays it back on a skeleton.

## Tests

```
pip install .[test]
pytest
```