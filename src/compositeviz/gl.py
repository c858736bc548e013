"""Thin moderngl bindings used by GPU-backed surfaces.

Requires ``pip install compositeviz[gl]``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from compositeviz.exceptions import ShaderCompileError, ShaderLinkError

if TYPE_CHECKING:
    import moderngl


def _require_moderngl():
    """Import moderngl or raise a clear error."""
    try:
        import moderngl
    except ImportError:
        raise ImportError(
            "The 'moderngl' package is required for compositeviz.gl. Install it with: pip install 'compositeviz[gl]'"
        ) from None
    return moderngl


def _failed_stage(log: str) -> str:
    """Guess which shader stage a compiler log refers to."""
    lowered = log.lower()
    if "vertex_shader" in lowered:
        return "vertex"
    if "fragment_shader" in lowered:
        return "fragment"
    return "unknown"


def create_shader_program(
    ctx: moderngl.Context,
    vertex_source: str,
    fragment_source: str,
) -> moderngl.Program:
    """Compile and link a vertex/fragment shader pair.

    Raises:
        ShaderCompileError: If either stage fails to compile.
        ShaderLinkError: If the stages compile but do not link.
    """
    moderngl = _require_moderngl()
    try:
        return ctx.program(vertex_shader=vertex_source, fragment_shader=fragment_source)
    except moderngl.Error as e:
        log = str(e)
        if "linker" in log.lower():
            raise ShaderLinkError(log) from e
        raise ShaderCompileError(_failed_stage(log), log) from e


def create_element_texture(
    ctx: moderngl.Context,
    width: int = 1,
    height: int = 1,
    data: bytes | None = None,
) -> moderngl.Texture:
    """Create an RGBA texture with clamp-to-edge wrapping and nearest filtering.

    The texture starts uninitialised unless ``data`` is given.
    """
    moderngl = _require_moderngl()
    texture = ctx.texture((width, height), 4, data=data)
    texture.repeat_x = False
    texture.repeat_y = False
    texture.filter = (moderngl.NEAREST, moderngl.NEAREST)
    return texture


def update_texture(texture: moderngl.Texture, data: Any) -> None:
    """Upload a full frame of RGBA pixel data (bytes or buffer) to ``texture``."""
    texture.write(data)


def clear_texture(texture: moderngl.Texture) -> None:
    """Fill ``texture`` with transparent black."""
    width, height = texture.size
    texture.write(bytes(width * height * 4))
