"""Anti-Gravity Snake.

Everything under ``snike`` except ``app``, ``render``, ``controls`` and
``audio`` runs without a display. ``SnikeGame`` is resolved on first access,
so importing the package for the headless simulation never starts pygame.
"""

__version__ = "0.2"

__all__ = ["SnikeGame"]

def __getattr__(name: str):
	if name == "SnikeGame":
		from .app import SnikeGame

		return SnikeGame
	raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__():
	return sorted(__all__)
