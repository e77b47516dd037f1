import pytest

from rasterkit.matrix import Matrix4
from rasterkit.scene import Light
from rasterkit.shader import PhongShader, Shader, ShadingPixel
from rasterkit.tgaimage import ImageFormat, TGAColor, TGAImage
from rasterkit.triangle import Triangle
from rasterkit.vector import Vec3

VERTS = [Vec3(1, 2, 3), Vec3(4, 5, 6), Vec3(-1, 0, 2)]


def _uniform(color):
    img = TGAImage(3, 3, ImageFormat.RGB)
    for x in range(3):
        for y in range(3):
            img.set(x, y, color)
    return img


def _textured(diffuse=TGAColor(100, 100, 100), spec=TGAColor(0, 0, 0)):
    tri = Triangle(VERTS)
    tri.diffuse_map = _uniform(diffuse)
    tri.normal_map = _uniform(TGAColor(0, 0, 255))
    tri.spec_map = _uniform(spec)
    return tri


def _shade(lights, tri=None):
    shader = PhongShader(Matrix4.identity())
    pix = ShadingPixel(
        tex_coord=Vec3(0.25, 0.75, 0),
        frag_pos=Vec3(0, 0, 0),
        eye_pos=Vec3(0, 0, 1),
        obj=tri if tri is not None else _textured(),
        lights=lights,
    )
    return shader.fragment_process(pix)


def test_shader_base_is_abstract():
    with pytest.raises(TypeError):
        Shader(Matrix4.identity())


def test_identity_transform_keeps_vertices():
    tri = Triangle(VERTS)
    before = list(tri.v_homogeneous)
    PhongShader(Matrix4.identity()).transform_vertices(Matrix4.identity(), tri)
    assert tri.v_homogeneous == before


def test_transform_divides_by_w():
    tri = Triangle(VERTS)
    PhongShader(Matrix4.identity()).transform_vertices(Matrix4.identity() * 2, tri)
    for vert, original in zip(tri.v_homogeneous, VERTS):
        assert (vert.x, vert.y, vert.z) == pytest.approx((original.x, original.y, original.z))
        assert vert.w == 2


def test_vertex_process_applies_viewport():
    viewport = Matrix4([(1, 0, 0, 5), (0, 1, 0, 7), (0, 0, 1, 0), (0, 0, 0, 1)])
    tri = Triangle(VERTS)
    PhongShader(viewport).vertex_process(Matrix4.identity(), tri)
    for vert, original in zip(tri.v_homogeneous, VERTS):
        assert vert.x == pytest.approx(original.x + 5)
        assert vert.y == pytest.approx(original.y + 7)
        assert vert.z == pytest.approx(original.z)


def test_no_lights_gives_black_opaque():
    assert _shade([]) == TGAColor(0, 0, 0, 255)


def test_light_along_normal_gives_diffuse_colour():
    result = _shade([Light(Vec3(0, 0, 1), Vec3(1, 1, 1))])
    assert result == TGAColor(100, 100, 100, 255)


def test_light_behind_surface_adds_no_diffuse():
    assert _shade([Light(Vec3(0, 0, -1), Vec3(1, 1, 1))]) == _shade([])


def test_strong_light_saturates():
    result = _shade([Light(Vec3(0, 0, 1), Vec3(1000, 1000, 1000))])
    assert (result.r, result.g, result.b) == (255, 255, 255)


def test_specular_highlight_saturates():
    tri = _textured(diffuse=TGAColor(0, 0, 0), spec=TGAColor(255, 255, 255))
    result = _shade([Light(Vec3(0, 0, 1), Vec3(1, 1, 1))], tri)
    assert result == TGAColor(255, 255, 255, 255)


def test_brighter_light_never_darkens():
    dim = _shade([Light(Vec3(1, 1, 2), Vec3(1, 1, 1))])
    bright = _shade([Light(Vec3(1, 1, 2), Vec3(3, 3, 3))])
    for name in ("r", "g", "b"):
        assert getattr(bright, name) >= getattr(dim, name)


def test_light_at_fragment_stays_in_range():
    result = _shade([Light(Vec3(0, 0, 0), Vec3(1, 1, 1))])
    assert result.a == 255
    assert all(0 <= c <= 255 for c in (result.r, result.g, result.b))