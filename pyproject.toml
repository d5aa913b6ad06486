[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bmplab"
version = "0.1.0"
description = "Read and write uncompressed 8-bit and 24-bit BMP images, with small image-processing commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["bmp", "bitmap", "image", "graphics", "image-processing"]
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
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bmp-copy = "bmplab.copy_tool:main"
bmp-halve = "bmplab.halve_tool:main"
bmp-brighten = "bmplab.brighten:main"
bmp-hello = "bmplab.hello:main"

[tool.hatch.build.targets.wheel]
packages = ["bmplab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
