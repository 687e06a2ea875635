[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "workbench"
version = "0.1.0"
description = "Small tools: a line matcher, a Mandelbrot renderer, an in-memory file, a CHIP-8 CPU core and an append-only key-value store"
requires-python = ">=3.10"
dependencies = []
keywords = ["grep", "mandelbrot", "chip-8", "emulator", "key-value", "log-structured"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
grep-lite = "workbench.grep_lite:main"
mandelbrot = "workbench.mandelbrot:main"
vfile = "workbench.vfile:main"
chip8 = "workbench.chip8:main"
akv-mem = "workbench.akv_mem:main"

[tool.hatch.build.targets.wheel]
packages = ["workbench"]

[tool.pytest.ini_options]
addopts = "-ra"
