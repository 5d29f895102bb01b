"""
系统配置 CRUD 操作
"""
from ats_recruitment.models.system import SystemSetting, ExternalApiCredential, AtsEnum
from .base import CRUDBase

system_setting_crud = CRUDBase(
    SystemSetting,
    label="系统设置",
    search_fields=("setting_name", "description"),
    exact_filters=("setting_name", "setting_type"),
    sortable=("setting_name", "setting_type"),
    unique_fields=(("setting_name",),),
)

external_api_credential_crud = CRUDBase(
    ExternalApiCredential,
    label="外部 API 凭证",
    search_fields=("service_name", "credential_key", "description"),
    exact_filters=("service_name", "credential_key"),
    range_filters=("expires_at",),
    sortable=("service_name", "credential_key", "expires_at"),
    unique_fields=(("credential_key",),),
)

ats_enum_crud = CRUDBase(
    AtsEnum,
    label="枚举",
    search_fields=("enum_code", "label", "description"),
    exact_filters=("enum_type", "enum_code"),
    like_filters=("label",),
    sortable=("enum_type", "enum_code", "label"),
    default_sort="enum_type",
    default_order="asc",
    unique_fields=(("enum_type", "enum_code"),),
)
