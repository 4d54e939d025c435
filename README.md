# lucaria

Game-side asset handling in plain Python:

- dataclass records for geometry, images, audio and shader sources, with a
  compact portable binary encoding;
- parsing of PVR and KTX containers that hold ETC2 or S3TC compressed images;
- a `Fetcher` that loads files through a pluggable loader, counts requests,
  completions and failures, and hands results to callbacks;
- helpers that fetch textures, cube maps, meshes and shader pairs into
  `concurrent.futures.Future` objects;
- a small scene/actor registry, collision-layer bit helpers, blend-weight
  curves and stable hash functions.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Modules

### `lucaria.data`

`AudioData`, `GeometryData`, `ImageData` and `ShaderData` are dataclasses, each
with `from_bytes` (a classmethod) and `to_bytes`. The encoding starts with one
byte giving the byte order (non-zero means little endian; `to_bytes` always
writes little endian), followed by 32-bit integers and floats, and 64-bit
unsigned length prefixes for sequences and strings. `ImageData`'s compression
flags are not part of the encoding. Malformed or truncated input raises
`DataFormatError`, a subclass of `ValueError`.

```python
from lucaria.data import GeometryData

geometry = GeometryData(
    count=3,
    positions=[(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)],
    indices=[(0, 1, 2)],
)
blob = geometry.to_bytes()
assert GeometryData.from_bytes(blob) == geometry
```

### `lucaria.stream`

`RawInputStream` is a read-only cursor over in-memory bytes with `read`,
`seek`, `tell`, `size` and `opened`. `seek` takes a `SeekOrigin` (`SET`,
`CURRENT`, `END`), returns the new position and raises `ValueError` for a
target outside the data. `write` raises `io.UnsupportedOperation`.

### `lucaria.fetch`

- `Fetcher(loader=None, root=".")` fetches files. The loader takes a path
  string and returns bytes; raising `OSError` or `LookupError` marks the fetch
  as failed. Without a loader, files are read from disk under `root`.
  `fetch_file(path, callback)` calls `callback(data)` on success;
  `fetch_files(paths, callback)` calls `callback(index, count, data)` for each
  success. Fetching is synchronous: callbacks run before the call returns.
  The `total`, `completed` and `failed` properties count requests;
  `reset_counters()` zeroes them and raises `RuntimeError` when failures left
  fetches unaccounted for.
- `FetchContainer` holds a value given with `emplace(value)` or delivered by a
  future given with `emplace_future(future, callback)`. `poll()` takes the
  future's result once it is done and runs the callback. `value()` raises
  `LookupError` while empty.
- `ContainerUpdater` keeps containers registered with it (a container created
  with an updater registers itself in `emplace_future`); `wait()` polls them
  all and drops those that have delivered.

### `lucaria.texture`, `lucaria.cubemap`, `lucaria.mesh`, `lucaria.shader`

- `load_compressed_image_data(data)` decodes a PVR (DXT1, DXT5, ETC2 RGB/RGBA)
  or KTX (ETC2 RGB/RGBA) container into an `ImageData`.
  `internal_format(image)` returns the GL internal format constant an image is
  uploaded with, and raises `ValueError` unless it has 3 or 4 channels.
- `fetch_texture(fetcher, image_path, etc_image_path=None, s3tc_image_path=None,
  etc_supported=False, s3tc_supported=False)` picks the ETC variant, then the
  S3TC variant, then the plain image, and returns a future of `ImageData`.
- `fetch_cubemap(...)` takes six paths per variant, chooses the same way, and
  returns a future of six `ImageData` ordered by `CubemapSide`.
- `Mesh(geometry)` keeps the indices, inverse bind poses and the non-empty
  vertex attributes keyed by `MeshAttribute`; `indices_count` is three per
  triangle. `MESH_ATTRIBUTE_SIZES` gives each attribute's component count.
  `GuizmoMesh` is a line mesh; `GuizmoMesh.from_geometry` builds the wireframe
  using `generate_line_indices`, which returns the sorted unique edges.
  `fetch_mesh(fetcher, path)` returns a future of `Mesh`.
- `load_shader_data(data)` decodes a `ShaderData`; `fetch_program(fetcher,
  vertex_path, fragment_path)` returns a future of `(vertex, fragment)`.

A fetch helper's future stays pending when a file cannot be fetched, and
fails with the decoding error when a file cannot be decoded.

```python
from lucaria.fetch import ContainerUpdater, FetchContainer, Fetcher
from lucaria.mesh import MeshAttribute, fetch_mesh

files = {"triangle.bin": blob}
fetcher = Fetcher(loader=lambda path: files[path])

updater = ContainerUpdater()
container = FetchContainer(updater)
container.emplace_future(fetch_mesh(fetcher, "triangle.bin"))
updater.wait()

mesh = container.value()
print(mesh.indices_count)                  # 3
print(MeshAttribute.POSITION in mesh)      # True
print(fetcher.completed, fetcher.failed)   # 1 0
```

### `lucaria.world`

`Scene` holds actors grouped by type: `make_actor(actor_type, *args, **kwargs)`,
`destroy_actor(actor)`, `each_actor(actor_type, callback)` and
`update_actors(actor_type)`, which calls `update()` on each. It also has a free
`components` dict. `World.make_scene(scene_type)` creates a `Scene`, builds
`scene_type(scene)` and returns it; a second scene of the same type raises
`ValueError`. `World.each_scene(callback)` visits scenes in creation order.

### `lucaria.layer`, `lucaria.weight`, `lucaria.hash`

```python
from lucaria.layer import KinematicLayer, contains_layer, remove_layer
from lucaria.weight import FadeinWeight, FadeoutWeight, OscillateWeight

mask = KinematicLayer.LAYER_0 | KinematicLayer.LAYER_3
print(contains_layer(mask, KinematicLayer.LAYER_3))   # True
print(remove_layer(mask, KinematicLayer.LAYER_3))     # 16

fade = FadeinWeight(length=2.0)
print(round(fade.compute_weight(1.0), 6))             # 0.5
print(fade.compute_weight(2.0))                       # 1.0
```

`FadeoutWeight.compute_weight(cursor, duration)` falls to 0 over the last
`length` of the duration; `OscillateWeight` cycles between 0 and 1 with its
`period`. The `GROUP_*` constants in `lucaria.layer` are the collision group
bits.

`uvec2_hash`, `vec3_hash` and `path_vector_hash` return 64-bit hashes that are
stable from run to run; `path_vector_hash` depends on the order of the paths.

## What the package does not do

It prepares and describes asset data but draws nothing and plays nothing: there
is no window, input handling, GPU upload, shader compilation or audio output.
It does not decode Ogg audio, WOFF2 fonts, skeletons, animations or physics
collision shapes, and it has no command-line program.

## Running the tests

```
pip install .[test]
pytest
```