# rasterkit

A small software rasterizer in pure Python with no third-party dependencies.
It loads a Wavefront OBJ model together with its diffuse, normal and specular
TGA textures. It then transforms the model through model, view and projection
matrices and fills every triangle against a depth buffer. Each pixel is shaded
with a Blinn-Phong lighting model, and the result is written as a TGA image.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
rasterkit [MODEL] [-o OUTPUT] [-s SIZE]
```

`MODEL` is a path prefix. From it the renderer reads:

- `<MODEL>.obj`: the geometry. It uses `v` lines, `vt` lines and `f` lines
  written as `v/vt/vn` index triples.
- `<MODEL>_diffuse.tga`: the diffuse colour map.
- `<MODEL>_nm.tga`: the normal map.
- `<MODEL>_spec.tga`: the specular map.

| Argument | Default | Meaning |
| --- | --- | --- |
| `MODEL` | `model/african_head` | the path prefix described above |
| `-o`, `--output` | `output.tga` | where the image is written |
| `-s`, `--size` | `2048` | width and height of the square image, in pixels (must be positive) |

The scene is fixed:

- The camera is at `(0, 0, 0)` and looks along `(-1, 1, -3)`. It has a 45°
  field of view, near plane 0.035 and far plane 50.
- Two point lights sit at `(2, 2, 2)` and `(-2, 2, -2)`, each of intensity 15.
- The canvas is RGB.

The output is written run-length encoded. The command returns 1 and prints
the error if the output file cannot be written.

If a texture or the OBJ file cannot be read, a warning is logged and
rendering goes on. A missing texture is replaced by an empty image. A
missing OBJ file gives a model with no faces.

## Library use

```python
from rasterkit.tgaimage import TGAImage, ImageFormat
from rasterkit.vector import Vec3
from rasterkit.model import Model
from rasterkit.scene import Camera, Light, Scene
from rasterkit.shader import ShaderType
from rasterkit.render import Render

camera = Camera(Vec3(-1, 1, -3), Vec3(0, 0, 0), 45, 1.0, 0.035, 50)
scene = Scene(camera)
scene.add_model(Model("model/african_head"))
scene.add_light(Light(Vec3(2, 2, 2), Vec3(15, 15, 15)))

image = TGAImage(512, 512, ImageFormat.RGB)
Render(image, ShaderType.PHONG_SHADING).render_scene(scene)
image.write_tga_file("output.tga", True)
```

### Modules

- `rasterkit.tgaimage`
  - `TGAImage` and `TGAColor`.
  - `TGAImage.read_tga_file` reads uncompressed and RLE TGA files in
    grayscale, RGB or RGBA. It raises `TGAError` on a bad file.
  - `write_tga_file` writes them, RLE by default.
  - Also pixel access with `get` and `set`, `flip_horizontally`,
    `flip_vertically`, `scale` (nearest-pixel resizing), `buffer` and `clear`.
- `rasterkit.vector`: `Vec2`, `Vec3` and `Vec4`, with arithmetic, dot and
  cross products, norms and `normalized`.
- `rasterkit.matrix`: `Matrix4`, a 4 × 4 matrix.
  - Multiplying by a `Vec4` applies the matrix. Multiplying by a number
    scales it.
  - Multiplying by another `Matrix4` composes them.
  - Also `identity`, `transposed`, `row` and `column`.
- `rasterkit.triangle`
  - `Triangle`, with `is_inside`, `barycentric` and texture lookups:
    `get_color`, `get_normal` and `get_spec`.
  - The helpers `interpolate_color` and `bilinear_interpolate`.
- `rasterkit.model`: `Model`, which loads the OBJ file and its three
  textures. It has `num_verts`, `num_faces`, `vert`, `texcoord` and `face`.
- `rasterkit.scene`: `Camera`, `Light` and `Scene` (`add_model`,
  `add_light`).
- `rasterkit.shader`: `PhongShader`, the abstract `Shader`, `ShaderType`
  and the `ShadingPixel` a fragment shader receives.
- `rasterkit.render`: `Render`.
  - It builds the model, view and projection matrices (`model_matrix`,
    `view_matrix`, `projection_matrix`).
  - It rasterizes with `draw_triangle` and `render_scene`.
  - It draws Bresenham lines with `draw_line`.
- `rasterkit.cli`: `main`, the entry point of the `rasterkit` command.

## Limitations

- Only Phong shading is available.
- Only the first three vertices of each face are used. Vertex normals
  (`vn`) in the OBJ file are read past but not used.
- The camera and lights used by the command cannot be changed from the
  command line.
- There is no interactive viewer. The package only writes TGA files.
- Rendering runs in pure Python, so large images take a while.