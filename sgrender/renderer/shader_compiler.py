import pathlib as pl
import pathlib as pl
import re
import re
import typing
import typing
import moderngl as mgl
import moderngl as mgl

SHADER_DIR: pl.Path = pl.Path(__file__).parent.resolve(strict=False) / "shaders"

def resolve_includes(source: str, base_path: pl.Path) -> str:
    """
    Recursively resolves #include "filename" directives in GLSL source code.
#   Recursively resolves #include "filename" directives in GLSL source code.
    GLSL has no #include of its own, so the included file's text is pasted in place.
#   GLSL has no #include of its own, so the included file's text is pasted in place.
    """
    # Captures the filename inside double quotes. Handles leading spaces.
#   # Captures the filename inside double quotes. Handles leading spaces.
    pattern: re.Pattern[str] = re.compile(pattern=r'^\s*#include\s+"([^"]+)"', flags=re.MULTILINE)
#   pattern: re.Pattern[str] = re.compile(pattern=r'^\s*#include\s+"([^"]+)"', flags=re.MULTILINE)

    def replace(match: re.Match[str]) -> str:
#   def replace(match: re.Match[str]) -> str:
        filename: str | typing.Any = match.group(1)
#       filename: str | typing.Any = match.group(1)
        included_path: pl.Path | typing.Any = base_path / filename
#       included_path: pl.Path | typing.Any = base_path / filename

        if not included_path.exists():
#       if not included_path.exists():
            print(f"Warning: Included file not found: {included_path}")
#           print(f"Warning: Included file not found: {included_path}")
            return f"// ERROR: Include not found {filename}\n"
#           return f"// ERROR: Include not found {filename}\n"

        included_content: str | typing.Any = included_path.read_text(encoding="utf-8")
#       included_content: str | typing.Any = included_path.read_text(encoding="utf-8")
        # Nested includes resolve relative to the same directory
#       # Nested includes resolve relative to the same directory
        return resolve_includes(source=included_content, base_path=base_path)
#       return resolve_includes(source=included_content, base_path=base_path)

    return pattern.sub(replace, source)
#   return pattern.sub(replace, source)

def load_shader_source(name: str, base_path: pl.Path = SHADER_DIR) -> str:
    return resolve_includes((base_path / name).read_text(encoding="utf-8"), base_path)
#   return resolve_includes((base_path / name).read_text(encoding="utf-8"), base_path)

def load_program(ctx: mgl.Context, vertex_shader: str, fragment_shader: str, base_path: pl.Path = SHADER_DIR) -> mgl.Program:
    return ctx.program(
#   return ctx.program(
          vertex_shader=load_shader_source(vertex_shader, base_path),
#         vertex_shader=load_shader_source(vertex_shader, base_path),
        fragment_shader=load_shader_source(fragment_shader, base_path),
#       fragment_shader=load_shader_source(fragment_shader, base_path),
    )
#   )
