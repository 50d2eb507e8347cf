#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
内层命名空间：验证多级命名空间解析与方法调用能跨越互操作边界
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Test:
    msg: str = ''

    # 避免被测试收集器当作测试类
    __test__ = False

    def test_me(self) -> str:
        return f"Hello, {self.msg}"
