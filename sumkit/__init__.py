"""Vector, matrix and quaternion math, meshes, models and their text formats, terrain, debug-draw batching and input state."""

__version__ = "0.1.0"

__all__ = [
    "scalar",
    "vector",
    "matrix",
    "quaternion",
    "colors",
    "transform",
    "mesh",
    "model",
    "modelio",
    "terrain",
    "simpledraw",
    "input",
    "postprocess",
]