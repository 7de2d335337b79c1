[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sumkit"
version = "0.1.0"
description = "3D engine toolkit with vector, matrix and quaternion math, meshes, models and their text formats, terrain, debug-draw batching and input state."
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "graphics", "math", "quaternion", "matrix", "mesh", "terrain", "skeleton", "animation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sumkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
