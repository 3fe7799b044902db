from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = "sqlite+pysqlite:///tickets.sqlite"
    # SQLite file path; used only when DATABASE_URL is not set.
    db_path: str | None = None
    host: str = "0.0.0.0"
    port: int = 3000
    api_prefix: str = "/api"
    # Development only; deployed databases are managed with alembic.
    auto_create_schema: bool = True
    sql_echo: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]
    app_env: str = "development"

    model_config = SettingsConfigDict(env_file=".env", env_prefix="", extra="ignore")

    @model_validator(mode="after")
    def _database_url_from_path(self) -> "Settings":
        if self.db_path and "database_url" not in self.model_fields_set:
            self.database_url = f"sqlite+pysqlite:///{self.db_path}"
        return self

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"


settings = Settings()
