"""
安全工具模块

密码哈希（passlib/bcrypt）与 JWT 令牌签发、校验（python-jose）
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import JWTError, jwt
from passlib.context import CryptContext

from .config import settings
from .exceptions import UnauthorizedException

ACCESS_TOKEN = "access"
REFRESH_TOKEN = "refresh"

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


def get_password_hash(password: str) -> str:
    """计算密码哈希"""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """校验明文密码与哈希是否匹配"""
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)


def _encode(claims: Dict[str, Any], token_use: str, expire: datetime) -> str:
    to_encode = dict(claims)
    to_encode.update({
        "token_use": token_use,
        "exp": expire,
        "iat": datetime.now(timezone.utc),
    })
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def issue_tokens(actor_id: str, role: str, email: str) -> Dict[str, Any]:
    """
    签发访问令牌与刷新令牌

    载荷中的 type 字段为角色判别符（systemAdmin / hrRecruiter / techReviewer / applicant）
    """
    now = datetime.now(timezone.utc)
    expired_at = now + timedelta(minutes=settings.access_token_expire_minutes)
    refreshable_until = now + timedelta(days=settings.refresh_token_expire_days)
    claims = {"id": actor_id, "type": role, "email": email}
    return {
        "access": _encode(claims, ACCESS_TOKEN, expired_at),
        "refresh": _encode(claims, REFRESH_TOKEN, refreshable_until),
        "expired_at": expired_at,
        "refreshable_until": refreshable_until,
    }


def decode_token(token: str, token_use: str = ACCESS_TOKEN) -> Dict[str, Any]:
    """解码并校验令牌（签名、过期时间、用途）"""
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError as exc:
        raise UnauthorizedException(f"令牌无效: {exc}")

    if payload.get("token_use") != token_use:
        raise UnauthorizedException("令牌用途不匹配")
    if not payload.get("id") or not payload.get("type"):
        raise UnauthorizedException("令牌载荷不完整")
    return payload
