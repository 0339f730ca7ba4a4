from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "VoiceRead Library API"
    VERSION: str = "1.0.0"

    # Database
    DATABASE_URL: str = "data/library.db"
    DB_POOL_SIZE: int = 5

    # Logging
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # CORS
    ALLOWED_ORIGINS: str = "*"

    # Auth
    JWT_SECRET: str = ""
    JWT_ALGORITHM: str = "HS256"
    TOKEN_EXPIRE_MINUTES: int = 0  # 0 = token never expires
    # INSECURE: compares admin passwords stored as plaintext. Only for legacy rows.
    ALLOW_PLAINTEXT_PASSWORDS: bool = False

    class Config:
        env_file = ".env"
        extra = "allow"


settings = Settings()
