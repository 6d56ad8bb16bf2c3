from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "LC_", "env_file": ".env", "env_file_encoding": "utf-8"}

    auth_username: str = Field(default="admin")
    auth_password: str = Field(min_length=1)
    jwt_secret: str = Field(min_length=32)
    jwt_expire_minutes: int = Field(default=1440)
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json", pattern=r"^(json|console)$")
    db_path: str = Field(default="language_content.db")
    cors_origins: str = Field(default="http://localhost:3000")

    # Bulk import
    import_default_batch_size: int = Field(default=10, ge=1, le=100)
    import_max_batch_size: int = Field(default=100, ge=1)


settings = Settings()
