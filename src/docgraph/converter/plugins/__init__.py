"""
Built-in converter plugins. Importing this package registers them.
"""

from .type_plugin import TypePlugin

__all__ = ["TypePlugin"]
