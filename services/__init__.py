"""
业务服务模块
"""

from .sample_data_service import SampleDataProvider, get_empty_array
from .mappers import person_to_dict, person_from_dict, to_primitive

__all__ = [
    "SampleDataProvider",
    "get_empty_array",
    "person_to_dict",
    "person_from_dict",
    "to_primitive",
]
