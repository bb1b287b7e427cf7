from .vec4 import Vec4
from .mat4 import InvalidArgument, Mat4

__all__ = ["Vec4", "Mat4", "InvalidArgument"]
