[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rawexif"
version = "0.1.0"
description = "Locate the Exif data embedded in camera raw files (Fujifilm RAF, TIFF-based CR2/NEF, JPEG)"
requires-python = ">=3.10"
dependencies = []
keywords = ["exif", "raw", "raf", "cr2", "nef", "tiff", "jpeg", "photography"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["rawexif"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
