#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
样例数据 - 固定数据集配置

说明：
- 人员列表顺序固定，按位置访问的测试依赖该顺序
- 其它数据为简单的键值映射
"""

from __future__ import annotations

from typing import List, Tuple


# 人员：(名, 姓)，顺序即列表顺序
PEOPLE: List[Tuple[str, str]] = [
    ("Zaphod", "Beeblebrox"),
    ("Arthur", "Dent"),
    ("Ford", "Prefect"),
]


SYSTEM_NAME: str = "Deep Thought"
ANSWER: int = 42
