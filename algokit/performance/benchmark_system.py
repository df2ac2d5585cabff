"""
算法性能基准测试系统

为图算法和索引结构生成随机输入，按不同规模多次运行并记录耗时，
汇总统计结果并保存为 JSON。
"""

import json
import logging
import statistics
import time
from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np


class BenchmarkStatus(Enum):
    """基准测试状态"""
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class InputKind(Enum):
    """测试输入的类型"""
    DAG = "dag"
    WEIGHTED_GRAPH = "weighted_graph"
    SEQUENCE = "sequence"
    WORDS = "words"


@dataclass
class BenchmarkConfig:
    """基准测试配置"""
    algorithm_name: str
    test_sizes: List[int]
    input_kind: InputKind = InputKind.DAG
    iterations: int = 3
    warmup_iterations: int = 1
    seed: Optional[int] = 0


@dataclass
class PerformanceMetrics:
    """性能指标"""
    algorithm_name: str
    input_size: int
    execution_time: float
    throughput: Optional[float] = None
    timestamp: Optional[str] = None

    def __post_init__(self):
        if self.timestamp is None:
            self.timestamp = datetime.now().isoformat()

        # 计算吞吐量（每秒处理的元素数）
        if self.throughput is None and self.execution_time > 0:
            self.throughput = self.input_size / self.execution_time


@dataclass
class BenchmarkResult:
    """基准测试结果"""
    config: BenchmarkConfig
    status: BenchmarkStatus
    start_time: str
    metrics: List[PerformanceMetrics] = field(default_factory=list)
    end_time: Optional[str] = None
    error_message: Optional[str] = None

    def get_summary_statistics(self) -> Dict[str, Any]:
        """按输入规模分组汇总耗时统计"""
        size_groups: Dict[int, List[float]] = {}
        for metric in self.metrics:
            size_groups.setdefault(metric.input_size, []).append(metric.execution_time)

        summary = {}
        for size, execution_times in size_groups.items():
            summary[f"size_{size}"] = {
                "input_size": size,
                "sample_count": len(execution_times),
                "execution_time": {
                    "mean": statistics.mean(execution_times),
                    "median": statistics.median(execution_times),
                    "std": statistics.stdev(execution_times) if len(execution_times) > 1 else 0,
                    "min": min(execution_times),
                    "max": max(execution_times),
                },
            }
        return summary

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        data["config"]["input_kind"] = self.config.input_kind.value
        return data


class GraphDataGenerator:
    """测试数据生成器

    所有随机数来自同一个 ``numpy.random.Generator``，相同种子生成相同数据。
    """

    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    def random_dag(self, size: int, edge_probability: float = 0.1) -> Dict[int, List[int]]:
        """生成随机有向无环图：只存在从小编号指向大编号的边"""
        mask = np.triu(self.rng.random((size, size)) < edge_probability, k=1)
        return {node: np.flatnonzero(mask[node]).tolist() for node in range(size)}

    def random_weighted_graph(self, size: int, edge_probability: float = 0.1,
                              max_weight: float = 10.0) -> Dict[int, List[Tuple[int, float]]]:
        """生成随机的非负权有向图（无自环）"""
        mask = self.rng.random((size, size)) < edge_probability
        np.fill_diagonal(mask, False)
        weights = self.rng.uniform(0.0, max_weight, (size, size))
        return {
            node: [(int(v), float(weights[node, v])) for v in np.flatnonzero(mask[node])]
            for node in range(size)
        }

    def random_sequence(self, size: int, low: int = -100, high: int = 100) -> List[int]:
        """生成随机整数序列"""
        return self.rng.integers(low, high, size).tolist()

    def random_words(self, size: int, alphabet: str = "abcd", max_length: int = 8) -> List[str]:
        """生成随机单词列表"""
        lengths = self.rng.integers(1, max_length + 1, size)
        letters = np.array(list(alphabet))
        return ["".join(self.rng.choice(letters, length)) for length in lengths]

    def generate(self, kind: InputKind, size: int) -> Any:
        if kind is InputKind.DAG:
            return self.random_dag(size)
        if kind is InputKind.WEIGHTED_GRAPH:
            return self.random_weighted_graph(size)
        if kind is InputKind.SEQUENCE:
            return self.random_sequence(size)
        return self.random_words(size)


class PerformanceBenchmark:
    """
    性能基准测试系统

    ``algorithm_func`` 接收一个生成好的输入（图、序列或单词列表）并运行算法。
    """

    def __init__(self, results_dir: str = "benchmarks/results"):
        """
        初始化基准测试系统

        Args:
            results_dir: 结果存储目录
        """
        self.results_dir = Path(results_dir)
        self.results_dir.mkdir(parents=True, exist_ok=True)

        # 每个实例使用独立的子 logger，文件处理器只属于本实例
        self.logger = logging.getLogger(f"{__name__}.{id(self)}")
        self._file_handler: Optional[logging.FileHandler] = None
        self._setup_logging()

    def _setup_logging(self) -> None:
        """设置日志记录：INFO 级别写入 ``results_dir/benchmark.log``"""
        log_file = self.results_dir / "benchmark.log"
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        self._file_handler = logging.FileHandler(log_file)
        self._file_handler.setFormatter(formatter)

        self.logger.addHandler(self._file_handler)
        self.logger.setLevel(logging.INFO)

    def close(self) -> None:
        """关闭并移除本实例的日志文件处理器"""
        if self._file_handler is not None:
            self.logger.removeHandler(self._file_handler)
            self._file_handler.close()
            self._file_handler = None

    def run_benchmark(self, algorithm_func: Callable[[Any], Any], config: BenchmarkConfig) -> BenchmarkResult:
        """
        运行基准测试

        Args:
            algorithm_func: 算法函数
            config: 测试配置

        Returns:
            测试结果；算法抛出异常时状态为 FAILED 并记录错误信息
        """
        benchmark_id = f"{config.algorithm_name}_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}"
        generator = GraphDataGenerator(config.seed)

        result = BenchmarkResult(
            config=config,
            status=BenchmarkStatus.RUNNING,
            start_time=datetime.now().isoformat()
        )

        try:
            self.logger.info(f"开始基准测试: {config.algorithm_name}")

            for size in config.test_sizes:
                self.logger.info(f"测试数据大小: {size}")
                test_data = generator.generate(config.input_kind, size)

                for _ in range(config.warmup_iterations):
                    algorithm_func(test_data)

                for _ in range(config.iterations):
                    start_time = time.perf_counter()
                    algorithm_func(test_data)
                    execution_time = time.perf_counter() - start_time
                    result.metrics.append(PerformanceMetrics(
                        algorithm_name=config.algorithm_name,
                        input_size=size,
                        execution_time=execution_time,
                    ))

            result.status = BenchmarkStatus.COMPLETED
            self.logger.info(f"基准测试完成: {config.algorithm_name}")

        except Exception as e:
            result.status = BenchmarkStatus.FAILED
            result.error_message = str(e)
            self.logger.error(f"基准测试失败: {config.algorithm_name} - {e}")

        finally:
            result.end_time = datetime.now().isoformat()
            self._save_result(benchmark_id, result)

        return result

    def run_comparative_benchmark(self, algorithms: Dict[str, Callable[[Any], Any]],
                                  test_sizes: List[int], input_kind: InputKind,
                                  iterations: int = 3) -> Dict[str, BenchmarkResult]:
        """
        在相同输入上对比多个算法

        Args:
            algorithms: 算法字典 {名称: 函数}
            test_sizes: 测试数据大小列表
            input_kind: 输入类型
            iterations: 迭代次数

        Returns:
            测试结果字典
        """
        results = {}
        for name, algorithm_func in algorithms.items():
            config = BenchmarkConfig(
                algorithm_name=name,
                test_sizes=test_sizes,
                input_kind=input_kind,
                iterations=iterations,
            )
            results[name] = self.run_benchmark(algorithm_func, config)

        self._generate_comparative_report(results)
        return results

    def _save_result(self, benchmark_id: str, result: BenchmarkResult) -> None:
        """保存测试结果"""
        result_file = self.results_dir / f"{benchmark_id}.json"
        with open(result_file, 'w', encoding='utf-8') as f:
            json.dump(result.to_dict(), f, indent=2, ensure_ascii=False)

    def _generate_comparative_report(self, results: Dict[str, BenchmarkResult]) -> Path:
        """生成对比报告"""
        report_file = self.results_dir / f"comparative_report_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}.json"

        report = {
            "timestamp": datetime.now().isoformat(),
            "algorithms": list(results.keys()),
            "summary": {
                name: result.get_summary_statistics()
                for name, result in results.items()
                if result.status == BenchmarkStatus.COMPLETED
            },
        }

        with open(report_file, 'w', encoding='utf-8') as f:
            json.dump(report, f, indent=2, ensure_ascii=False)

        self.logger.info(f"对比报告已生成: {report_file}")
        return report_file
