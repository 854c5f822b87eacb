from .version import __version__
from .convert.reflow import ReflowOptions, reflow_text

__all__ = ["ReflowOptions", "reflow_text", "__version__"]
