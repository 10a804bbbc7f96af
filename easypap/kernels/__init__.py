"""Computation kernels working on square RGBA images."""