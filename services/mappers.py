#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
互操作映射：将 dataclass 模型与普通字典/列表互相转换。
宿主端只接收基础类型时使用，不改变服务层对外接口。
"""

from typing import Any, Dict, Mapping

from models.person import Person
from utils.exceptions import ValidationError
from utils.validators import validate_name


def person_to_dict(person: Person) -> Dict[str, Any]:
    return {
        'firstname': person.firstname,
        'lastname': person.lastname,
        'fullname': person.fullname,
    }


def person_from_dict(row: Mapping[str, Any]) -> Person:
    if not isinstance(row, Mapping):
        raise ValidationError("人员数据必须是字典")
    for key in ('firstname', 'lastname'):
        ok, msg = validate_name(row.get(key))
        if not ok:
            raise ValidationError(f"{key}: {msg}")
    # fullname 为派生字段，忽略
    return Person(firstname=row['firstname'], lastname=row['lastname'])


def to_primitive(value: Any) -> Any:
    """递归转换为基础类型（dict/list/str/int...）"""
    if isinstance(value, Person):
        return person_to_dict(value)
    if isinstance(value, Mapping):
        return {str(k): to_primitive(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_primitive(v) for v in value]
    return value
