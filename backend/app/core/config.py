from pydantic_settings import BaseSettings
from typing import List, Optional
from datetime import timedelta


class Settings(BaseSettings):
    ENV: str = "development"
    SECRET_KEY: str = "change-me-in-production"
    DATABASE_URL: str = "sqlite:///./portfolio.db"
    LOG_LEVEL: str = "INFO"
    
    # CORS
    CORS_ORIGINS: str = "http://localhost:5173,http://localhost:8080"
    
    # JWT
    JWT_ACCESS_EXPIRES_DAYS: int = 7
    
    # Admin seed
    ADMIN_EMAIL: Optional[str] = "admin@portfolio.local"
    ADMIN_PASSWORD: Optional[str] = None
    
    # Клиент админки (PortfolioAPI)
    API_BASE_URL: str = "http://localhost:8000"
    API_TIMEOUT: float = 10.0
    
    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]
    
    @property
    def jwt_expires_delta(self) -> timedelta:
        return timedelta(days=self.JWT_ACCESS_EXPIRES_DAYS)
    
    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
