"""
算法管理器 - 算法注册、执行和指标记录

提供统一的算法入口，支持按名称注册和执行算法，记录每次执行的耗时和结果。
所有执行都是同步的；失败时记录日志和指标后原样抛出异常，不做重试。
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Type

from .base import Algorithm
from .config import ToolkitConfig
from .graph.advanced.dijkstra import Dijkstra, HeapDijkstra
from .graph.advanced.mst import KruskalMST
from .graph.advanced.topological_sort import DFSTopologicalSort, KahnTopologicalSort
from .graph.basic.bfs import BreadthFirstSearch
from .graph.basic.dfs import DepthFirstSearch, IterativeDepthFirstSearch
from .searching.string.kmp import KMPSearch
from .searching.string.rabin_karp import RabinKarpSearch


class AlgorithmCategory(Enum):
    """算法分类枚举"""
    TRAVERSAL = "traversal"
    SHORTEST_PATH = "shortest_path"
    TOPOLOGICAL = "topological"
    SPANNING_TREE = "spanning_tree"
    STRING_SEARCH = "string_search"


@dataclass
class AlgorithmMetrics:
    """算法执行指标"""
    execution_time: float
    success: bool = True
    error_message: Optional[str] = None
    input_size: Optional[int] = None


class AlgorithmRegistry:
    """算法注册表

    ``dfs`` 和 ``dijkstra`` 两个名称按配置中的策略解析到具体实现，
    其余名称固定指向一个实现。
    """

    def __init__(self, config: Optional[ToolkitConfig] = None):
        self.config = config or ToolkitConfig()
        self._algorithms: Dict[str, Type[Algorithm]] = {}
        self._categories: Dict[str, AlgorithmCategory] = {}
        self._register_default_algorithms()

    def _register_default_algorithms(self) -> None:
        """注册默认算法"""
        # 图遍历
        self.register("dfs_recursive", DepthFirstSearch, AlgorithmCategory.TRAVERSAL)
        self.register("dfs_iterative", IterativeDepthFirstSearch, AlgorithmCategory.TRAVERSAL)
        self.register("bfs", BreadthFirstSearch, AlgorithmCategory.TRAVERSAL)
        dfs_class = DepthFirstSearch if self.config.traversal_strategy == "recursive" else IterativeDepthFirstSearch
        self.register("dfs", dfs_class, AlgorithmCategory.TRAVERSAL)

        # 最短路径
        self.register("dijkstra_scan", Dijkstra, AlgorithmCategory.SHORTEST_PATH)
        self.register("dijkstra_heap", HeapDijkstra, AlgorithmCategory.SHORTEST_PATH)
        dijkstra_class = HeapDijkstra if self.config.shortest_path_strategy == "heap" else Dijkstra
        self.register("dijkstra", dijkstra_class, AlgorithmCategory.SHORTEST_PATH)

        # 拓扑排序
        self.register("topological_sort", DFSTopologicalSort, AlgorithmCategory.TOPOLOGICAL)
        self.register("topological_sort_kahn", KahnTopologicalSort, AlgorithmCategory.TOPOLOGICAL)

        # 最小生成树
        self.register("kruskal_mst", KruskalMST, AlgorithmCategory.SPANNING_TREE)

        # 字符串匹配
        self.register("kmp", KMPSearch, AlgorithmCategory.STRING_SEARCH)
        self.register("rabin_karp", RabinKarpSearch, AlgorithmCategory.STRING_SEARCH)

    def register(self, name: str, algorithm_class: Type[Algorithm],
                 category: AlgorithmCategory) -> None:
        """
        注册算法

        Args:
            name: 算法名称，已存在时覆盖
            algorithm_class: 算法类，必须可以无参数实例化
            category: 算法分类

        Raises:
            ValueError: ``algorithm_class`` 不是 Algorithm 的子类
        """
        if not (isinstance(algorithm_class, type) and issubclass(algorithm_class, Algorithm)):
            raise ValueError(f"算法类 {algorithm_class!r} 必须继承自 Algorithm")

        self._algorithms[name] = algorithm_class
        self._categories[name] = category

    def unregister(self, name: str) -> None:
        """移除算法；名称不存在时抛出 KeyError"""
        del self._algorithms[name]
        del self._categories[name]

    def get_algorithm(self, name: str) -> Type[Algorithm]:
        """获取算法类"""
        if name not in self._algorithms:
            raise KeyError(f"未找到算法: {name}")
        return self._algorithms[name]

    def get_category(self, name: str) -> Optional[AlgorithmCategory]:
        """获取算法分类"""
        return self._categories.get(name)

    def list_algorithms(self, category: Optional[AlgorithmCategory] = None) -> List[str]:
        """列出算法"""
        if category is None:
            return list(self._algorithms.keys())
        return [name for name, cat in self._categories.items() if cat == category]

    def __contains__(self, name: object) -> bool:
        return name in self._algorithms


class AlgorithmManager:
    """
    算法管理器

    按名称执行注册表中的算法，记录执行指标。
    """

    def __init__(self, config: Optional[ToolkitConfig] = None,
                 registry: Optional[AlgorithmRegistry] = None):
        self.logger = logging.getLogger(__name__)
        self.config = config or ToolkitConfig()
        self.registry = registry or AlgorithmRegistry(self.config)
        self._metrics_history: Dict[str, List[AlgorithmMetrics]] = {}

    def execute_algorithm(self, algorithm_name: str, *args, **kwargs) -> Any:
        """
        执行算法

        Args:
            algorithm_name: 算法名称
            *args: 算法参数
            **kwargs: 算法关键字参数

        Returns:
            算法执行结果

        Raises:
            KeyError: 算法不存在
            AlgorithmError: 算法本身报告的错误，原样抛出
        """
        algorithm_class = self.registry.get_algorithm(algorithm_name)
        start_time = time.perf_counter()

        try:
            result = algorithm_class().execute(*args, **kwargs)
        except Exception as e:
            execution_time = time.perf_counter() - start_time
            self._record(algorithm_name, AlgorithmMetrics(
                execution_time=execution_time,
                success=False,
                error_message=str(e),
                input_size=self._estimate_input_size(args, kwargs),
            ))
            self.logger.error("算法 %s 执行失败: %s", algorithm_name, e)
            raise

        execution_time = time.perf_counter() - start_time
        self._record(algorithm_name, AlgorithmMetrics(
            execution_time=execution_time,
            success=True,
            input_size=self._estimate_input_size(args, kwargs),
        ))
        self.logger.info("算法 %s 执行成功，耗时: %.4fs", algorithm_name, execution_time)
        return result

    def get_metrics(self, algorithm_name: str) -> List[AlgorithmMetrics]:
        """获取算法执行指标"""
        return list(self._metrics_history.get(algorithm_name, []))

    def get_performance_summary(self, algorithm_name: str) -> Dict[str, Any]:
        """
        获取算法性能摘要

        Args:
            algorithm_name: 算法名称

        Returns:
            性能摘要字典；没有任何记录时返回空字典
        """
        metrics = self._metrics_history.get(algorithm_name, [])
        if not metrics:
            return {}

        successful_metrics = [m for m in metrics if m.success]
        if not successful_metrics:
            return {"total_executions": len(metrics), "success_rate": 0.0}

        execution_times = [m.execution_time for m in successful_metrics]

        return {
            "total_executions": len(metrics),
            "successful_executions": len(successful_metrics),
            "success_rate": len(successful_metrics) / len(metrics),
            "avg_execution_time": sum(execution_times) / len(execution_times),
            "min_execution_time": min(execution_times),
            "max_execution_time": max(execution_times),
            "total_execution_time": sum(execution_times),
        }

    @staticmethod
    def _estimate_input_size(args: tuple, kwargs: dict) -> Optional[int]:
        """估算输入数据大小：所有带长度的参数长度之和"""
        total_size = sum(len(value) for value in (*args, *kwargs.values()) if hasattr(value, "__len__"))
        return total_size if total_size > 0 else None

    def _record(self, algorithm_name: str, metrics: AlgorithmMetrics) -> None:
        """记录算法执行指标，超出上限时丢弃最旧的记录"""
        if not self.config.enable_metrics:
            return
        history = self._metrics_history.setdefault(algorithm_name, [])
        history.append(metrics)
        overflow = len(history) - self.config.max_metrics_history
        if overflow > 0:
            del history[:overflow]


# 全局算法管理器实例
_algorithm_manager: Optional[AlgorithmManager] = None


def get_algorithm_manager() -> AlgorithmManager:
    """获取全局算法管理器实例"""
    global _algorithm_manager
    if _algorithm_manager is None:
        _algorithm_manager = AlgorithmManager()
    return _algorithm_manager


def execute_algorithm(algorithm_name: str, *args, **kwargs) -> Any:
    """便捷函数：执行算法"""
    return get_algorithm_manager().execute_algorithm(algorithm_name, *args, **kwargs)


def register_algorithm(name: str, algorithm_class: Type[Algorithm],
                       category: AlgorithmCategory) -> None:
    """便捷函数：注册算法"""
    get_algorithm_manager().registry.register(name, algorithm_class, category)
