[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rasterkit"
version = "0.1.0"
description = "A small software rasterizer with Phong shading, OBJ model loading and TGA image output"
requires-python = ">=3.10"
dependencies = []
keywords = ["rasterizer", "rendering", "tga", "wavefront-obj", "phong", "software-renderer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rasterkit = "rasterkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rasterkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
