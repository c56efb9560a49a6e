"""
Configuration settings for Storefront API
"""
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings"""
    
    # Product Store (KV namespace REST endpoint)
    PRODUCTS_KV_URL: Optional[str] = None
    PRODUCTS_KV_TOKEN: Optional[str] = None
    PRODUCTS_KV_TIMEOUT: float = 5.0
    
    # Local product catalogue, used when no KV namespace is set
    PRODUCTS_FILE: Optional[str] = None
    
    # Order Store
    DATABASE_URL: Optional[str] = None
    
    # Service
    SERVICE_NAME: str = "storefront-api"
    SERVICE_PORT: int = 8000
    LOG_LEVEL: str = "INFO"
    
    # Metrics
    METRICS_ENABLED: bool = True
    
    class Config:
        env_file = ".env"
        case_sensitive = True


# Create global settings instance
settings = Settings()
