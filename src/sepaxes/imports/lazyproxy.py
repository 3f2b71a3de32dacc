# src/sepaxes/imports/lazyproxy.py

from __future__ import annotations

import importlib
from types import ModuleType
from typing import Any, Optional

__all__ = ["LazyModule", "lazy_module"]


class LazyModule:
	"""
	Stand-in for a plotting dependency that is imported on first attribute access.

	``pyplot`` stays unloaded until something touches it, so ``matplotlib.use()``
	can still pick a backend after ``import sepaxes``. Attributes the module
	does not define are tried as submodules (``mpl.lines``, ``mpl.ticker``).
	"""

	def __init__(self, name: str, *, install: Optional[str] = None, reason: Optional[str] = None) -> None:
		self._name = name
		self._install = install
		self._reason = reason
		self._mod: Optional[ModuleType] = None

	@property
	def loaded(self) -> bool:
		return self._mod is not None

	def _missing(self) -> str:
		message = f"sepaxes needs '{self._name}'"
		if self._reason:
			message += f" for {self._reason}"
		if self._install:
			message += f"; try '{self._install}'"
		return message + "."

	def _module(self) -> ModuleType:
		if self._mod is None:
			try:
				self._mod = importlib.import_module(self._name)
			except ImportError as exc:
				raise ImportError(self._missing()) from exc
		return self._mod

	def __getattr__(self, item: str) -> Any:
		mod = self._module()
		if hasattr(mod, item):
			return getattr(mod, item)
		try:
			return importlib.import_module(f"{self._name}.{item}")
		except ImportError as exc:
			raise AttributeError(f"{self._name!r} has no attribute or submodule {item!r}") from exc

	def __repr__(self) -> str:
		return f"<LazyModule {self._name!r} loaded={self.loaded}>"


def lazy_module(name: str, *, install: Optional[str] = None, reason: Optional[str] = None) -> LazyModule:
	return LazyModule(name, install=install, reason=reason)
