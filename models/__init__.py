"""
数据模型模块
"""

from .person import Person
from .label import LabelPlaceholder

__all__ = [
    'Person',
    'LabelPlaceholder'
]
