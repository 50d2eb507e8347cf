#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
样例数据服务层

所有方法均为纯函数：每次调用都重新构造返回值，调用方不应依赖对象身份。
"""

import logging
from typing import Any, Dict, List, Optional

from models.person import Person
from .sample_data_config import PEOPLE, SYSTEM_NAME, ANSWER


logger = logging.getLogger(__name__)


class SampleDataProvider:
    """样例数据提供者（互操作名称：Backend）"""

    @staticmethod
    def get_people() -> List[Person]:
        """获取人员列表"""
        return [Person(firstname, lastname) for firstname, lastname in PEOPLE]

    @staticmethod
    def get_other_data() -> Dict[str, Any]:
        """获取其它数据"""
        return {
            'system_name': SYSTEM_NAME,
            'answer': ANSWER,
        }

    @classmethod
    def get_data(cls) -> Dict[str, Any]:
        """获取完整数据集"""
        return {
            'people': cls.get_people(),
            'other_data': cls.get_other_data(),
        }

    @classmethod
    def get_person(cls, firstname: str) -> Optional[Person]:
        """按名精确查找人员（区分大小写），未找到返回 None"""
        for person in cls.get_people():
            if person.firstname == firstname:
                return person
        logger.debug(f"未找到人员: {firstname!r}")
        return None


def get_empty_array() -> List[Any]:
    """返回空列表，用于验证空容器的跨边界传递"""
    return []
