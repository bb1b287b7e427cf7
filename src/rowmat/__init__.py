from .linalg import InvalidArgument, Mat4, Vec4

__version__ = "0.1.0"

__all__ = ["Vec4", "Mat4", "InvalidArgument"]
