from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Arambo Property API"
    app_version: str = "1.0.0"
    environment: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = ""

    database_url: str = "sqlite:///./arambo.db"

    # "*" allows any origin; otherwise a comma-separated list
    cors_origins: str = "*"

    # JWT authentication
    jwt_secret: str = "change-me"
    jwt_expires_minutes: int = 60 * 24
    jwt_issuer: str = "arambo-cms-api"
    jwt_audience: str = "arambo-cms-client"
    bcrypt_rounds: int = 12

    # Development-only bypass for the bearer-token gate
    skip_auth: bool = False

    # Admin account created at startup when both are set
    admin_username: str = ""
    admin_password: str = ""

    model_config = {"env_file": ".env"}

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def cors_origin_list(self) -> list[str]:
        if self.cors_origins.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
