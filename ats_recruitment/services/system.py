"""
系统配置服务

系统设置、外部 API 凭证（写操作审计）、通用枚举（公开只读）
"""
from ats_recruitment.crud.system import system_setting_crud, external_api_credential_crud, ats_enum_crud
from ats_recruitment.models.system import (
    SystemSettingCreate, SystemSettingUpdate, SystemSettingResponse, SystemSettingRequest,
    ExternalApiCredentialCreate, ExternalApiCredentialUpdate, ExternalApiCredentialResponse,
    ExternalApiCredentialRequest,
    AtsEnumCreate, AtsEnumUpdate, AtsEnumResponse, AtsEnumRequest,
)
from .base import ResourceService


class SystemSettingService(ResourceService):
    crud = system_setting_crud
    response_model = SystemSettingResponse
    create_schema = SystemSettingCreate
    update_schema = SystemSettingUpdate
    request_schema = SystemSettingRequest
    audited = True


class ExternalApiCredentialService(ResourceService):
    crud = external_api_credential_crud
    response_model = ExternalApiCredentialResponse
    create_schema = ExternalApiCredentialCreate
    update_schema = ExternalApiCredentialUpdate
    request_schema = ExternalApiCredentialRequest
    audited = True


class AtsEnumService(ResourceService):
    crud = ats_enum_crud
    response_model = AtsEnumResponse
    create_schema = AtsEnumCreate
    update_schema = AtsEnumUpdate
    request_schema = AtsEnumRequest


system_setting_service = SystemSettingService()
external_api_credential_service = ExternalApiCredentialService()
ats_enum_service = AtsEnumService()
