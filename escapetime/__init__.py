"""Escape-time rendering of the Mandelbrot set."""
