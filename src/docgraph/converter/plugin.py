from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .converter import Converter


class ConverterPlugin:
    """Base class of everything that listens to converter events."""

    def __init__(self, converter: "Converter"):
        self.converter = converter

    def remove(self) -> None:
        """Detach from the converter. Subclasses unregister their listeners."""
        self.converter.plugins = {
            name: plugin for name, plugin in self.converter.plugins.items() if plugin is not self
        }
