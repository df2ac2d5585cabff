from abc import ABC, abstractmethod
from typing import Any


class Algorithm(ABC):
    """所有算法和索引结构的基类。

    定义了算法的统一接口。图算法在 ``execute`` 中完成一次完整计算；
    有状态的索引结构（并查集、前缀树、线段树）的 ``execute`` 返回当前状态的快照。

    子类必须实现:
        execute: 执行算法并返回结果的抽象方法
    """

    @abstractmethod
    def execute(self, *args, **kwargs) -> Any:
        """执行算法并返回结果。

        参数:
            *args: 位置参数，具体参数取决于算法实现
            **kwargs: 关键字参数，具体参数取决于算法实现

        返回:
            Any: 算法执行的结果，类型取决于具体算法

        异常:
            NotImplementedError: 如果子类没有实现此方法
        """
        raise NotImplementedError
