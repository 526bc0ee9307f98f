"""Compact numerical methods: linear solves, Legendre quadrature, FFTs, interpolation, root finding, sorting and searching, integration, molecular dynamics and relaxation solvers."""

__version__ = "0.1.0"