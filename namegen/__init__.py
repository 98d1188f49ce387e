"""Random Chinese, English and Japanese name generators with an interactive console menu."""

__version__ = "1.0.0"

__all__ = ["__version__"]