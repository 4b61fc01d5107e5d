from dataclasses import dataclass, field
from typing import List, Optional
import logging
import os
import secrets
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    return int(value) if value else None


@dataclass
class DatabaseConfig:
    """Database configuration"""
    url: str = "sqlite:///./data/movies.db"

    @classmethod
    def from_env(cls) -> "DatabaseConfig":
        return cls(url=os.getenv("DATABASE_URL", "sqlite:///./data/movies.db"))

    @property
    def path(self) -> str:
        return self.url.replace("sqlite:///", "")


@dataclass
class AuthConfig:
    """JWT and password hashing configuration

    Without JWT_SECRET_KEY a random key is generated, so issued tokens
    do not survive a restart.
    """
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    argon2_time_cost: Optional[int] = None
    argon2_memory_cost: Optional[int] = None
    argon2_parallelism: Optional[int] = None

    @classmethod
    def from_env(cls) -> "AuthConfig":
        secret = os.getenv("JWT_SECRET_KEY")
        if not secret:
            logger.warning("JWT_SECRET_KEY not set, using a random per-process key")
            secret = secrets.token_hex(32)
        return cls(
            jwt_secret_key=secret,
            jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
            access_token_expire_minutes=int(os.getenv("JWT_ACCESS_EXPIRE_MINUTES", "60")),
            argon2_time_cost=_optional_int("ARGON2_TIME_COST"),
            argon2_memory_cost=_optional_int("ARGON2_MEMORY_COST"),
            argon2_parallelism=_optional_int("ARGON2_PARALLELISM"),
        )


@dataclass
class CatalogConfig:
    """Catalog seeding configuration"""
    seed_path: Optional[str] = None

    @classmethod
    def from_env(cls) -> "CatalogConfig":
        return cls(seed_path=os.getenv("CATALOG_SEED_PATH") or None)


@dataclass
class ApiConfig:
    """HTTP server configuration"""
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "ApiConfig":
        origins_str = os.getenv("CORS_ORIGINS", "*")
        origins = [o.strip() for o in origins_str.split(",") if o.strip()]
        return cls(
            host=os.getenv("API_HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8080")),
            cors_origins=origins or ["*"],
        )


@dataclass
class Settings:
    """Application settings"""
    database: DatabaseConfig
    auth: AuthConfig
    catalog: CatalogConfig
    api: ApiConfig
    log_level: str = "INFO"
    log_dir: Optional[str] = "logs"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            database=DatabaseConfig.from_env(),
            auth=AuthConfig.from_env(),
            catalog=CatalogConfig.from_env(),
            api=ApiConfig.from_env(),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_dir=os.getenv("LOG_DIR", "logs") or None,
        )
