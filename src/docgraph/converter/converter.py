"""
Converter: drives the resolve phase and dispatches its events to plugins.
"""

import itertools
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Type as PyType

from docgraph.logging_config import logger
from docgraph.exceptions import PluginRegistrationError
from docgraph.models import Project
from .context import Context


Listener = Tuple[int, int, Callable[..., Any]]


class Converter:
    """
    Publish/subscribe pipeline for the resolve phase.

    Events fire synchronously. Listeners with a higher priority run first;
    listeners of equal priority run in registration order.
    """

    # Fired once before the first declaration is resolved: (context)
    EVENT_RESOLVE_BEGIN = "resolveBegin"
    # Fired exactly once per declaration: (context, reflection)
    EVENT_RESOLVE = "resolveReflection"
    # Fired once after every declaration has been resolved: (context)
    EVENT_RESOLVE_END = "resolveEnd"

    _plugin_classes: Dict[str, PyType] = {}

    def __init__(self, disabled_plugins: Optional[Iterable[str]] = None):
        """
        Args:
            disabled_plugins: Names of registered plugins not to attach
        """
        self._listeners: Dict[str, List[Listener]] = {}
        self._sequence = itertools.count()
        self.plugins: Dict[str, Any] = {}

        disabled = set(disabled_plugins or ())
        for name, plugin_class in self._plugin_classes.items():
            if name in disabled:
                logger.debug(f"Converter plugin '{name}' disabled")
                continue
            self.plugins[name] = plugin_class(self)

    @classmethod
    def register_plugin(cls, name: str, plugin_class: PyType) -> None:
        """
        Register a plugin class under a unique name.

        Raises:
            PluginRegistrationError: If ``name`` is already taken
        """
        if name in cls._plugin_classes:
            raise PluginRegistrationError(name)
        cls._plugin_classes[name] = plugin_class

    @classmethod
    def get_plugin_class(cls, name: str) -> Optional[PyType]:
        return cls._plugin_classes.get(name)

    def get_plugin(self, name: str) -> Optional[Any]:
        return self.plugins.get(name)

    def on(self, event: str, callback: Callable[..., Any], priority: int = 0) -> None:
        listeners = self._listeners.setdefault(event, [])
        listeners.append((-priority, next(self._sequence), callback))
        listeners.sort(key=lambda listener: listener[:2])

    def off(self, event: str, callback: Callable[..., Any]) -> None:
        listeners = self._listeners.get(event, [])
        self._listeners[event] = [l for l in listeners if l[2] != callback]

    def trigger(self, event: str, *args: Any) -> None:
        for _, _, callback in list(self._listeners.get(event, [])):
            callback(*args)

    def resolve(self, project: Project) -> Context:
        """
        Run the resolve phase over every declaration of ``project``.

        Returns:
            The context shared by all events of this run
        """
        context = Context(self, project)
        logger.info(f"Resolving {len(project)} declarations of '{project.name}'...")

        self.trigger(self.EVENT_RESOLVE_BEGIN, context)
        for reflection in project.iter_declarations():
            self.trigger(self.EVENT_RESOLVE, context, reflection)
            context.stats.declarations_resolved += 1
        self.trigger(self.EVENT_RESOLVE_END, context)

        logger.info(
            f"Resolved {context.stats.references_linked} references "
            f"({context.stats.references_dangling} dangling), "
            f"built {context.stats.hierarchies_built} hierarchies"
        )
        return context
