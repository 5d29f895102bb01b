"""
核心模块：配置、数据库、异常、响应、安全
"""
