#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
领域异常类型：用于在映射/调度层抛出语义化错误，并由装饰器统一映射为错误信封。
"""


class DomainError(Exception):
    code = "domain_error"

    def __init__(self, message: str = "业务错误"):
        super().__init__(message)


class ValidationError(DomainError):
    code = "validation_error"


class NotFoundError(DomainError):
    code = "not_found"
