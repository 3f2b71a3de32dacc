# src/sepaxes/imports/__init__.py

from __future__ import annotations

from .lazyproxy import LazyModule, lazy_module

np = numpy = lazy_module("numpy", install="pip install numpy", reason="tick and limit arithmetic")
mpl = matplotlib = lazy_module("matplotlib", install="pip install matplotlib", reason="axes decoration")
plt = pyplot = lazy_module("matplotlib.pyplot", install="pip install matplotlib", reason="figure creation")

__all__ = [
	"LazyModule", "lazy_module",
	"np", "numpy",
	"mpl", "matplotlib",
	"plt", "pyplot",
]
