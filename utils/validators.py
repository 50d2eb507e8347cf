#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
输入校验工具：集中化常用校验，便于映射层与调度层复用。
"""

from typing import Tuple


def validate_name(value) -> Tuple[bool, str]:
    # 不做 trim / 大小写归一化，空字符串也是合法文本
    if isinstance(value, str):
        return True, ""
    if value is None:
        return False, "姓名不能为空"
    return False, "姓名必须是文本"


def validate_arity(args: tuple, expected: int) -> Tuple[bool, str]:
    if len(args) == expected:
        return True, ""
    return False, f"参数个数应为 {expected}，实际为 {len(args)}"
