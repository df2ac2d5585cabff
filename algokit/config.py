"""Toolkit-wide configuration.

Values can be given directly or loaded from a YAML file::

    traversal_strategy: iterative
    shortest_path_strategy: heap
    enable_metrics: true
    log_level: INFO
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields

import yaml

from .exceptions import ConfigurationError

TRAVERSAL_STRATEGIES = ("recursive", "iterative")
SHORTEST_PATH_STRATEGIES = ("scan", "heap")


@dataclass
class ToolkitConfig:
    """Configuration for :class:`algokit.algorithm_manager.AlgorithmManager`.

    Parameters
    ----------
    traversal_strategy:
        ``"recursive"`` or ``"iterative"``; which depth-first search the
        ``dfs`` registry entry resolves to.
    shortest_path_strategy:
        ``"scan"`` (array-scan Dijkstra) or ``"heap"`` (priority queue); which
        implementation the ``dijkstra`` registry entry resolves to.
    enable_metrics:
        Record an :class:`~algokit.algorithm_manager.AlgorithmMetrics` entry
        for every managed execution.
    max_metrics_history:
        Number of metrics entries kept per algorithm.
    log_level:
        Level applied to the ``algokit`` logger by :func:`configure_logging`.
    plugin_group:
        Entry point group scanned by the plugin loader.
    """

    traversal_strategy: str = "iterative"
    shortest_path_strategy: str = "scan"
    enable_metrics: bool = True
    max_metrics_history: int = 1000
    log_level: str = "WARNING"
    plugin_group: str = "algokit.algorithms"

    def __post_init__(self) -> None:
        if self.traversal_strategy not in TRAVERSAL_STRATEGIES:
            raise ConfigurationError(
                f"traversal_strategy must be one of {TRAVERSAL_STRATEGIES}, got {self.traversal_strategy!r}"
            )
        if self.shortest_path_strategy not in SHORTEST_PATH_STRATEGIES:
            raise ConfigurationError(
                f"shortest_path_strategy must be one of {SHORTEST_PATH_STRATEGIES}, "
                f"got {self.shortest_path_strategy!r}"
            )
        if self.max_metrics_history < 1:
            raise ConfigurationError("max_metrics_history must be at least 1")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigurationError(f"unknown log level {self.log_level!r}")


def load_config(path: str) -> ToolkitConfig:
    """Load :class:`ToolkitConfig` from a YAML file.

    An empty file yields the defaults. Unknown keys raise
    :class:`~algokit.exceptions.ConfigurationError`.
    """
    with open(path, "r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: expected a mapping at the top level")
    known = {f.name for f in fields(ToolkitConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"{path}: unknown configuration keys {unknown}")
    return ToolkitConfig(**data)


def configure_logging(config: ToolkitConfig) -> logging.Logger:
    """Apply ``config.log_level`` to the package logger and return it."""
    logger = logging.getLogger("algokit")
    logger.setLevel(config.log_level.upper())
    return logger
