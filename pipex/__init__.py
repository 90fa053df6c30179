"""String helpers with C-library semantics, a small printf and a buffered line reader."""

__version__ = "1.0.0"