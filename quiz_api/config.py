from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./data/quiz.sqlite3"
    jwt_secret: str  # no default, must come from env or .env
    jwt_algorithm: str = "HS256"
    token_ttl_seconds: int = 60 * 60  # 1h
    bcrypt_rounds: int = 10
    cors_origins: list[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}
