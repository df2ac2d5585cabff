from __future__ import annotations

import importlib
import logging
from importlib.metadata import entry_points
from pathlib import Path
from types import ModuleType
from typing import Dict, Optional, Tuple

from watchdog.events import FileModifiedEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .algorithm_manager import AlgorithmCategory, AlgorithmRegistry
from .base import Algorithm
from .config import ToolkitConfig


logger = logging.getLogger(__name__)


class AlgorithmPluginLoader(FileSystemEventHandler):
    """Discover, register and hot-reload algorithm plugins.

    A plugin is a module published under the configured entry point group.
    It exposes ``ALGORITHMS``, a mapping of registry name to
    ``(AlgorithmSubclass, AlgorithmCategory)``, which is registered into the
    given :class:`AlgorithmRegistry`.
    """

    def __init__(self, registry: Optional[AlgorithmRegistry] = None,
                 group: Optional[str] = None) -> None:
        self.registry = registry or AlgorithmRegistry()
        self.group = group or ToolkitConfig().plugin_group
        self.modules: Dict[str, ModuleType] = {}
        # last mapping successfully registered per plugin
        self._registered: Dict[str, Dict[str, Tuple[type, AlgorithmCategory]]] = {}
        self.observer = Observer()

    def load_plugins(self) -> None:
        """Load and register all entry point plugins for the configured group."""
        for ep in entry_points().select(group=self.group):
            module = ep.load()
            self._register(ep.name, dict(getattr(module, "ALGORITHMS", {})))
            self.modules[ep.name] = module
            path = Path(module.__file__).resolve().parent
            self.observer.schedule(self, str(path), recursive=False)
            logger.debug("Loaded plugin %s from %s", ep.name, module.__file__)

    def _register(self, name: str, provided: Dict[str, Tuple[type, AlgorithmCategory]]) -> None:
        """Replace the algorithms registered for plugin ``name`` with ``provided``.

        Every entry is validated before anything is unregistered, so an invalid
        mapping leaves the registry untouched.
        """
        for algorithm_name, (algorithm_class, _) in provided.items():
            if not (isinstance(algorithm_class, type) and issubclass(algorithm_class, Algorithm)):
                raise ValueError(
                    f"plugin {name}: {algorithm_name} -> {algorithm_class!r} is not an Algorithm"
                )
        for algorithm_name in self._registered.pop(name, {}):
            if algorithm_name in self.registry:
                self.registry.unregister(algorithm_name)
        for algorithm_name, (algorithm_class, category) in provided.items():
            self.registry.register(algorithm_name, algorithm_class, category)
        self._registered[name] = dict(provided)

    # Watchdog API ---------------------------------------------------------
    def on_modified(self, event: FileModifiedEvent) -> None:  # type: ignore[override]
        path = Path(event.src_path).resolve()
        for name, module in self.modules.items():
            if Path(module.__file__).resolve() == path:
                self._reload(name, module)
                break

    # Internal helpers -----------------------------------------------------
    def _reload(self, name: str, module: ModuleType) -> None:
        # importlib.reload mutates the module in place, keep the mapping itself
        snapshot = dict(self._registered.get(name, {}))
        try:
            new_module = importlib.reload(module)
            self._register(name, dict(getattr(new_module, "ALGORITHMS", {})))
        except (ImportError, SyntaxError, ValueError):
            logger.exception("Failed to reload plugin %s, keeping last good algorithms", name)
            self._register(name, snapshot)
            return
        self.modules[name] = new_module
        logger.info("Reloaded plugin %s", name)

    def start(self) -> None:
        self.observer.start()

    def stop(self) -> None:
        self.observer.stop()
        self.observer.join()
