"""Exceptions for compositeviz rendering and GL bindings."""

from __future__ import annotations


class VisualizationConfigError(Exception):
    """Snapshot cannot be laid out.

    Raised before any draw command is issued when a guarded precondition
    fails (no source nodes, non-positive duration, empty colour palette).

    Attributes:
        reason: Short machine-friendly reason ("no_sources", "duration", ...)
        message: Human-readable error message
    """

    def __init__(self, reason: str, message: str | None = None) -> None:
        self.reason = reason
        self.message = message or self._default_message()
        super().__init__(self.message)

    def _default_message(self) -> str:
        return f"Cannot visualize graph snapshot: {self.reason}"


class ShaderCompileError(Exception):
    """A shader stage failed to compile.

    Attributes:
        shader_type: Stage that failed ("vertex", "fragment" or "unknown")
        log: Compiler output
    """

    def __init__(self, shader_type: str, log: str) -> None:
        self.shader_type = shader_type
        self.log = log
        super().__init__(f"could not compile {shader_type} shader: {log}")


class ShaderLinkError(Exception):
    """Compiled shaders could not be linked into a program.

    Attributes:
        log: Linker output
    """

    def __init__(self, log: str) -> None:
        self.log = log
        super().__init__(f"Can't link shader program: {log}")
