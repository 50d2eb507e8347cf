#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
互操作样例数据 - 配置管理
"""

import logging
import os


class Config:
    """基础配置类"""

    # 日志配置
    LOG_LEVEL = os.environ.get('FIXTURE_LOG_LEVEL', 'WARNING').upper()
    LOGGER_NAMES = ('services', 'utils', 'fixture')

    # 调度配置：invoke 默认是否转换为基础类型
    MARSHAL_RESULTS = os.environ.get('FIXTURE_MARSHAL_RESULTS', '0') in ('1', 'true', 'True')

    DEBUG = False
    TESTING = False

    @classmethod
    def init_fixture(cls, namespace):
        """将配置挂载到命名空间并设置日志级别"""
        namespace.config = {
            key: getattr(cls, key) for key in dir(cls) if key.isupper()
        }
        level = logging.getLevelName(cls.LOG_LEVEL)
        if not isinstance(level, int):
            level = logging.WARNING
        for name in cls.LOGGER_NAMES:
            logging.getLogger(name).setLevel(level)


class DevelopmentConfig(Config):
    """开发环境配置"""
    DEBUG = True


class ProductionConfig(Config):
    """生产环境配置"""
    DEBUG = False


class TestingConfig(Config):
    """测试环境配置"""
    TESTING = True
    LOG_LEVEL = 'DEBUG'


# 配置字典
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
