# app/core/config.py

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./friend_graph.db"
    SQL_ECHO: bool = False

    # JWT used to carry the requesting user's id
    SECRET_KEY: str = "CHANGE_THIS_TO_A_SUPER_SECRET_KEY"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    LOG_LEVEL: str = "INFO"

    class Config:
        """
        Values come from the environment first, then from a .env file in the
        working directory.
        """
        env_file = ".env"


settings = Settings()
