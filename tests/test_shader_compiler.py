import unittest
import unittest
import pathlib as pl
import pathlib as pl
import tempfile
import tempfile
from sgrender.renderer.shader_compiler import SHADER_DIR, load_shader_source, resolve_includes
from sgrender.renderer.shader_compiler import SHADER_DIR, load_shader_source, resolve_includes

class TestResolveIncludes(unittest.TestCase):
    def test_nested_includes(self) -> None:
#   def test_nested_includes(self) -> None:
        with tempfile.TemporaryDirectory() as directory:
#       with tempfile.TemporaryDirectory() as directory:
            base_path = pl.Path(directory)
#           base_path = pl.Path(directory)
            (base_path / "outer.glsl").write_text('#include "inner.glsl"\nfloat outer;\n', encoding="utf-8")
#           (base_path / "outer.glsl").write_text('#include "inner.glsl"\nfloat outer;\n', encoding="utf-8")
            (base_path / "inner.glsl").write_text("float inner;\n", encoding="utf-8")
#           (base_path / "inner.glsl").write_text("float inner;\n", encoding="utf-8")
            source = resolve_includes('#version 330 core\n  #include "outer.glsl"\nvoid main() {}\n', base_path)
#           source = resolve_includes('#version 330 core\n  #include "outer.glsl"\nvoid main() {}\n', base_path)
        self.assertNotIn("#include", source)
#       self.assertNotIn("#include", source)
        self.assertLess(source.index("float inner;"), source.index("float outer;"))
#       self.assertLess(source.index("float inner;"), source.index("float outer;"))
        self.assertTrue(source.startswith("#version 330 core\n"))
#       self.assertTrue(source.startswith("#version 330 core\n"))

    def test_missing_include_leaves_marker(self) -> None:
#   def test_missing_include_leaves_marker(self) -> None:
        with tempfile.TemporaryDirectory() as directory:
#       with tempfile.TemporaryDirectory() as directory:
            source = resolve_includes('#include "missing.glsl"\n', pl.Path(directory))
#           source = resolve_includes('#include "missing.glsl"\n', pl.Path(directory))
        self.assertIn("// ERROR: Include not found missing.glsl", source)
#       self.assertIn("// ERROR: Include not found missing.glsl", source)

    def test_packaged_shaders_resolve(self) -> None:
#   def test_packaged_shaders_resolve(self) -> None:
        for name in ["phong_vs.glsl", "phong_fs.glsl", "texture_fs.glsl", "screen_vs.glsl", "screen_fs.glsl"]:
#       for name in ["phong_vs.glsl", "phong_fs.glsl", "texture_fs.glsl", "screen_vs.glsl", "screen_fs.glsl"]:
            self.assertTrue((SHADER_DIR / name).exists(), name)
#           self.assertTrue((SHADER_DIR / name).exists(), name)
            source = load_shader_source(name)
#           source = load_shader_source(name)
            self.assertNotIn("#include", source)
#           self.assertNotIn("#include", source)
            self.assertNotIn("ERROR", source)
#           self.assertNotIn("ERROR", source)
        self.assertIn("vec3 phong(", load_shader_source("phong_fs.glsl"))
#       self.assertIn("vec3 phong(", load_shader_source("phong_fs.glsl"))

    def test_phong_skips_lights_behind_the_surface(self) -> None:
#   def test_phong_skips_lights_behind_the_surface(self) -> None:
        for name in ["phong_fs.glsl", "texture_fs.glsl"]:
#       for name in ["phong_fs.glsl", "texture_fs.glsl"]:
            self.assertIn("if (nDotL <= 0.0)", load_shader_source(name), name)
#           self.assertIn("if (nDotL <= 0.0)", load_shader_source(name), name)
