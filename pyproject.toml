[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hello_face"
version = "0.1.0"
description = "Face detection and embedding primitives, with preview, caching, settings and launcher helpers for a face authentication front end"
requires-python = ">=3.10"
dependencies = []
keywords = ["face", "authentication", "embedding", "detection", "preview"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Recognition",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linux-hello-config = "hello_face.launcher:main"

[tool.hatch.build.targets.wheel]
packages = ["hello_face"]

[tool.pytest.ini_options]
addopts = "-ra"
