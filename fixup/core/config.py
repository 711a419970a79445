# fixup/core/config.py
import os
from typing import List, Optional, Tuple, Type

from pydantic import BaseModel
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)


CONFIG_FILE = os.getenv("FIXUP_CONFIG", "config/config.yml")


class ServerConfig(BaseModel):
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:3000,http://localhost:5173"
    email: str = "noreply@fixup.local"
    node_id: int = 1
    verify_url: str = "http://localhost:8080/v1/auth/verify?token={token}"


class HTTPConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8080


class PaginationConfig(BaseModel):
    default_per_page: int = 10
    max_per_page: int = 50


class PostgresConfig(BaseModel):
    host: str = "localhost"
    port: int = 5432
    db: str = "fixup"
    user: str = "postgres"
    password: str = "postgres"
    pool_size: int = 10

    @property
    def url(self) -> str:
        return f"postgresql+psycopg2://{self.user}:{self.password}@{self.host}:{self.port}/{self.db}"


class RedisConfig(BaseModel):
    url: str = "redis://localhost:6379/0"


class JWTConfig(BaseModel):
    access_secret: str = "change-me-access-secret-at-least-32-bytes"
    access_ttl: int = 15 * 60
    refresh_secret: str = "change-me-refresh-secret-at-least-32-bytes"
    refresh_ttl: int = 7 * 24 * 60 * 60
    verification_secret: str = "change-me-verification-secret-32-bytes"
    verification_ttl: int = 24 * 60 * 60


class Argon2Config(BaseModel):
    salt_len: int = 16
    key_len: int = 79
    time: int = 1
    memory: int = 64 * 1024
    threads: int = 4


class AESConfig(BaseModel):
    key: str = "0123456789abcdef0123456789abcdef"


class MailerConfig(BaseModel):
    host: str = "localhost"
    port: int = 465
    user: str = ""
    password: str = ""
    use_ssl: bool = True


class CDNConfig(BaseModel):
    url_fmt: str = "https://cdn.fixup.local/{}"
    key_pair_id: str = ""
    private_key: str = ""
    expiry: int = 60 * 60
    distribution_id: str = ""


class AWSConfig(BaseModel):
    region: str = "us-east-1"
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None
    bucket: str = "fixup"
    random_name_size: int = 16
    cdn: CDNConfig = CDNConfig()


class TemplatesConfig(BaseModel):
    confirmation: str = "templates/register_confirm.html"
    verified: str = "templates/verified_letter.html"


class Settings(BaseSettings):
    server: ServerConfig = ServerConfig()
    http: HTTPConfig = HTTPConfig()
    pagination: PaginationConfig = PaginationConfig()
    postgres: PostgresConfig = PostgresConfig()
    redis: RedisConfig = RedisConfig()
    jwt: JWTConfig = JWTConfig()
    argon2: Argon2Config = Argon2Config()
    aes: AESConfig = AESConfig()
    mailer: MailerConfig = MailerConfig()
    aws: AWSConfig = AWSConfig()
    templates: TemplatesConfig = TemplatesConfig()

    @property
    def is_production(self) -> bool:
        return self.server.environment == "production"

    def get_cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.server.cors_origins.split(",") if o.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        yaml_file=CONFIG_FILE,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # env > .env > yaml
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


settings = Settings()
