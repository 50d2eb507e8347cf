"""
工具模块
"""

from .decorators import handle_errors
from .validators import validate_name, validate_arity

__all__ = [
    'handle_errors',
    'validate_name',
    'validate_arity'
]
