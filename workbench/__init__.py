"""Small tools: line matching, Mandelbrot rendering, an in-memory file, a CHIP-8 CPU core and an append-only key-value store."""

__version__ = "0.1.0"