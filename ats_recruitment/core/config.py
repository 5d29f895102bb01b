"""
应用配置模块

所有配置项均可由环境变量或项目根目录的 .env 覆盖（不区分大小写），例如：
    DATABASE_URL=sqlite+aiosqlite:///./data/ats.db
    JWT_SECRET_KEY=...
    CORS_ORIGINS=["http://localhost:5173"]
"""
import json
from functools import lru_cache
from pathlib import Path
from typing import List
from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent.parent

DEFAULT_JWT_SECRET = "change-me-in-production"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "ATS-Recruitment-API"
    app_env: str = "development"
    debug: bool = True

    # SQLite 文件默认放在 <项目根>/data 下
    database_url: str = f"sqlite+aiosqlite:///{BASE_DIR / 'data' / 'ats.db'}"

    cors_origins: List[str] = ["*"]

    # 令牌：访问令牌用于调用接口，刷新令牌只能换取新的令牌对
    jwt_secret_key: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    refresh_token_expire_days: int = 7

    # 测试环境可调低以加快注册 / 登录
    bcrypt_rounds: int = 12

    # 检索接口的 limit 缺省值与上限，超出上限的请求被截断而非拒绝
    default_page_limit: int = 20
    max_page_limit: int = 100

    # 关闭后 /auth/systemAdmin/join 返回 403，新管理员只能由已有管理员开通
    admin_join_enabled: bool = True

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        # 同时接受 JSON 数组与逗号分隔
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("database_url", mode="before")
    @classmethod
    def resolve_relative_sqlite_path(cls, v):
        if isinstance(v, str) and "///./" in v:
            return v.replace("///./", f"///{BASE_DIR.as_posix()}/")
        return v

    @model_validator(mode="after")
    def check_consistency(self) -> "Settings":
        if not 0 < self.default_page_limit <= self.max_page_limit:
            raise ValueError("default_page_limit 必须在 1 与 max_page_limit 之间")
        if self.app_env == "production" and self.jwt_secret_key == DEFAULT_JWT_SECRET:
            raise ValueError("生产环境必须设置 JWT_SECRET_KEY")
        return self

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"


@lru_cache
def get_settings() -> Settings:
    """获取配置单例"""
    return Settings()


settings = get_settings()
