"""
嵌套命名空间测试单元（test_module.inner.Test）
"""

from . import inner

__all__ = ['inner']
