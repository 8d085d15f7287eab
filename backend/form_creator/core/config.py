from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class DatabaseConfigurationError(RuntimeError):
    """Raised when neither DATABASE_URL nor the DB_* parts describe a database."""


class Settings(BaseSettings):
    PROJECT_NAME: str = "Dynamic Form Creator API"
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # Either a full URL, or the parts below
    DATABASE_URL: str = ""
    DB_DRIVER: str = "postgresql+psycopg2"
    DB_HOST: str = ""
    DB_PORT: int = 5432
    DB_USER: str = ""
    DB_PASSWORD: str = ""
    DB_NAME: str = ""

    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = Field(5000, validation_alias=AliasChoices("SERVER_PORT", "PORT"))

    CORS_ORIGINS: list[str] = ["*"]

    # Submissions
    DEFAULT_LANGUAGE: str = "en"

    # Form listing
    DEFAULT_PAGE_SIZE: int = 5
    MAX_PAGE_SIZE: int = 50

    model_config = {"env_file": ".env", "case_sensitive": True, "extra": "ignore"}

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL

        parts = {
            "DB_HOST": self.DB_HOST,
            "DB_USER": self.DB_USER,
            "DB_PASSWORD": self.DB_PASSWORD,
            "DB_NAME": self.DB_NAME,
        }
        missing = [name for name, value in parts.items() if not value]
        if missing:
            raise DatabaseConfigurationError(
                "DATABASE_URL is not set and the following variables are missing: " + ", ".join(missing)
            )

        return URL.create(
            self.DB_DRIVER,
            username=self.DB_USER,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        ).render_as_string(hide_password=False)


settings = Settings()
