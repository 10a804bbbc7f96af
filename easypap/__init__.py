"""Image-based computation kernels with CPU activity statistics and a trace model."""

__version__ = "0.1.0"