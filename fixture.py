#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
互操作样例数据 - 宿主入口

宿主运行时加载本模块即可获得全部导出名称：
Person / Backend / get_empty_array / TestModule.inner.Test
"""

import logging
import os
from types import SimpleNamespace
from typing import Any, Callable, Dict, Tuple

from config import config
from models import Person, LabelPlaceholder
from services import SampleDataProvider, get_empty_array, to_primitive
from utils.decorators import handle_errors
from utils.exceptions import NotFoundError, ValidationError
from utils.validators import validate_arity
import test_module as TestModule


logger = logging.getLogger(__name__)

# 兼容旧引用
Backend = SampleDataProvider

# 操作名 -> (可调用对象, 参数个数)
OPERATIONS: Dict[str, Tuple[Callable[..., Any], int]] = {
    'get_people': (SampleDataProvider.get_people, 0),
    'get_data': (SampleDataProvider.get_data, 0),
    'get_person': (SampleDataProvider.get_person, 1),
    'get_other_data': (SampleDataProvider.get_other_data, 0),
    'get_empty_array': (get_empty_array, 0),
}


def invoke(operation: str, *args, marshal: bool = False) -> Any:
    """按名称调用样例数据操作"""
    entry = OPERATIONS.get(operation)
    if entry is None:
        logger.warning(f"未知操作: {operation!r}")
        raise NotFoundError(f"未知操作: {operation}")
    func, arity = entry
    ok, msg = validate_arity(args, arity)
    if not ok:
        raise ValidationError(f"{operation}: {msg}")
    result = func(*args)
    return to_primitive(result) if marshal else result


@handle_errors
def safe_invoke(operation: str, *args, marshal: bool = False) -> Any:
    """invoke 的信封版本，错误不抛出"""
    return invoke(operation, *args, marshal=marshal)


def load_fixture(config_name=None) -> SimpleNamespace:
    """入口工厂函数"""
    if config_name is None:
        config_name = os.environ.get('FIXTURE_ENV', 'default')
    config_cls = config.get(config_name)
    if config_cls is None:
        raise NotFoundError(f"未知配置: {config_name}")

    namespace = SimpleNamespace(
        Person=Person,
        LabelPlaceholder=LabelPlaceholder,
        Backend=Backend,
        SampleDataProvider=SampleDataProvider,
        get_empty_array=get_empty_array,
        TestModule=TestModule,
    )
    config_cls.init_fixture(namespace)

    marshal_default = namespace.config['MARSHAL_RESULTS']
    namespace.invoke = lambda operation, *args, marshal=marshal_default: invoke(operation, *args, marshal=marshal)
    namespace.safe_invoke = lambda operation, *args, marshal=marshal_default: safe_invoke(operation, *args, marshal=marshal)
    logger.debug(f"fixture 已加载，配置: {config_name}")
    return namespace


__all__ = [
    'Person',
    'LabelPlaceholder',
    'Backend',
    'SampleDataProvider',
    'get_empty_array',
    'TestModule',
    'OPERATIONS',
    'invoke',
    'safe_invoke',
    'load_fixture',
]
