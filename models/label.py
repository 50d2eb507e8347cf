#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
标签占位模型
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LabelPlaceholder:
    """未注入 GUI 工厂时 get_label 的返回值"""
    text: str = ''
