from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DATABASE_URL: str
    AUTH_ISSUER: str = ""
    AUTH_AUDIENCE: str = ""
    JWKS_TTL: int = 60 * 60  # Time to live : 1 hour
    LOG_LEVEL: str = "INFO"
    SPLIT_TOLERANCE: float = 0.01
    DEFAULT_EVENT_COLOR: str = "#EC4899"
    DB_CONNECT_RETRIES: int = 5

    @property
    def JWKS_URL(self) -> str:
        return f"{self.AUTH_ISSUER}/.well-known/jwks.json"

    class Config:
        env_file = ".env"

settings = Settings()
