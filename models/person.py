#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
人员数据模型
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .label import LabelPlaceholder


@dataclass(frozen=True, eq=False)
class Person:
    """人员：名 + 姓，构造后不可变"""
    firstname: str = ''
    lastname: str = ''

    @property
    def fullname(self) -> str:
        return f"{self.firstname} {self.lastname}"

    def get_label(self, factory: Optional[Callable[[str], Any]] = None) -> Any:
        """生成显示标签。

        GUI 标签由宿主提供的 factory 构造；未提供时返回占位对象，
        核心逻辑不依赖任何图形工具包。
        """
        if factory is None:
            return LabelPlaceholder(text=self.fullname)
        return factory(self.fullname)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return other.firstname == self.firstname and other.lastname == self.lastname

    def __hash__(self) -> int:
        return hash(self.firstname) ^ hash(self.lastname)

    def __str__(self) -> str:
        return f"Person({self.lastname}, {self.firstname})"
