"""
Conversion pipeline: converter events, run context and plugins.
"""

from .context import Context, ResolutionStats
from .converter import Converter
from .plugin import ConverterPlugin
from . import plugins
from .plugins import TypePlugin

__all__ = [
    "Context",
    "ResolutionStats",
    "Converter",
    "ConverterPlugin",
    "TypePlugin",
]
