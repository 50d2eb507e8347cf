#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
装饰器模块
"""

import logging
from functools import wraps

from .exceptions import DomainError


logger = logging.getLogger(__name__)


def handle_errors(f):
    """错误处理装饰器：将结果包装为信封，异常映射为错误码"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            return {'success': True, 'data': f(*args, **kwargs)}
        except DomainError as e:
            logger.warning(f"{f.__name__} 调用失败 [{e.code}]: {e}")
            return {'success': False, 'code': e.code, 'message': str(e)}
        except Exception as e:
            logger.warning(f"{f.__name__} 内部错误: {e}")
            return {'success': False, 'code': 'internal_error', 'message': f'操作失败: {str(e)}'}

    return decorated_function
