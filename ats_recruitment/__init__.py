"""
ATS 招聘管理系统后端
"""
