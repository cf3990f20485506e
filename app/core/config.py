from pydantic import model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "postgresql://records:records_pass@db:5432/student_records"
    ENVIRONMENT: str = "development"
    PORT: int = 8080

    CORS_ORIGINS: list[str] = ["*"]

    # Sync client
    API_BASE_URL: str = "http://localhost:8080"
    HTTP_TIMEOUT: float = 10.0
    SYNC_MAX_WORKERS: int = 8

    model_config = {"env_file": ".env", "extra": "ignore"}

    @model_validator(mode="after")
    def fix_postgres_url(self) -> "Settings":
        # Some hosts provide postgres:// instead of postgresql://
        if self.DATABASE_URL.startswith("postgres://"):
            self.DATABASE_URL = self.DATABASE_URL.replace(
                "postgres://", "postgresql://", 1
            )
        return self


settings = Settings()
