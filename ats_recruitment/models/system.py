"""
系统配置模型模块 - SQLModel 版本

系统设置、外部 API 凭证、通用枚举
"""
from datetime import datetime
from typing import Optional
from sqlmodel import Field

from .base import (
    SQLModelBase,
    TimestampMixin,
    SoftDeleteMixin,
    IDMixin,
    SoftDeleteResponse,
    PageRequest,
    DateTimeField,
)


# ==================== 系统设置 ====================

class SystemSettingBase(SQLModelBase):
    setting_name: str = Field(..., min_length=1, max_length=100, index=True, description="设置项名称")
    setting_value: str = Field(..., description="设置值")
    setting_type: str = Field("string", max_length=50, description="string / int / bool / json")
    description: Optional[str] = Field(None, max_length=1000)


class SystemSetting(SystemSettingBase, SoftDeleteMixin, TimestampMixin, IDMixin, table=True):
    """系统设置表模型"""
    __tablename__ = "ats_recruitment_system_settings"


class SystemSettingCreate(SystemSettingBase):
    pass


class SystemSettingUpdate(SQLModelBase):
    setting_name: Optional[str] = Field(None, min_length=1, max_length=100)
    setting_value: Optional[str] = None
    setting_type: Optional[str] = Field(None, max_length=50)
    description: Optional[str] = Field(None, max_length=1000)


class SystemSettingResponse(SystemSettingBase, SoftDeleteResponse):
    pass


class SystemSettingRequest(PageRequest):
    setting_name: Optional[str] = None
    setting_type: Optional[str] = None


# ==================== 外部 API 凭证 ====================

class ExternalApiCredentialBase(SQLModelBase):
    service_name: str = Field(..., min_length=1, max_length=100, index=True)
    credential_key: str = Field(..., min_length=1, max_length=255, index=True, description="凭证标识")
    credential_json: str = Field(..., description="凭证内容 JSON 文本")
    expires_at: Optional[datetime] = DateTimeField(None)
    description: Optional[str] = Field(None, max_length=1000)


class ExternalApiCredential(ExternalApiCredentialBase, SoftDeleteMixin, TimestampMixin, IDMixin, table=True):
    """外部 API 凭证表模型"""
    __tablename__ = "ats_recruitment_external_api_credentials"


class ExternalApiCredentialCreate(ExternalApiCredentialBase):
    pass


class ExternalApiCredentialUpdate(SQLModelBase):
    service_name: Optional[str] = Field(None, min_length=1, max_length=100)
    credential_key: Optional[str] = Field(None, min_length=1, max_length=255)
    credential_json: Optional[str] = None
    expires_at: Optional[datetime] = None
    description: Optional[str] = Field(None, max_length=1000)


class ExternalApiCredentialResponse(ExternalApiCredentialBase, SoftDeleteResponse):
    pass


class ExternalApiCredentialRequest(PageRequest):
    service_name: Optional[str] = None
    credential_key: Optional[str] = None
    expires_at_from: Optional[datetime] = None
    expires_at_to: Optional[datetime] = None


# ==================== 通用枚举 ====================

class AtsEnumBase(SQLModelBase):
    enum_type: str = Field(..., min_length=1, max_length=100, index=True, description="枚举类别")
    enum_code: str = Field(..., min_length=1, max_length=100, description="枚举编码")
    label: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    extra_data: Optional[str] = Field(None, description="附加数据 JSON 文本")


class AtsEnum(AtsEnumBase, SoftDeleteMixin, TimestampMixin, IDMixin, table=True):
    """通用枚举表模型"""
    __tablename__ = "ats_recruitment_enums"


class AtsEnumCreate(AtsEnumBase):
    pass


class AtsEnumUpdate(SQLModelBase):
    enum_type: Optional[str] = Field(None, min_length=1, max_length=100)
    enum_code: Optional[str] = Field(None, min_length=1, max_length=100)
    label: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    extra_data: Optional[str] = None


class AtsEnumResponse(AtsEnumBase, SoftDeleteResponse):
    pass


class AtsEnumRequest(PageRequest):
    enum_type: Optional[str] = None
    enum_code: Optional[str] = None
    label: Optional[str] = None
