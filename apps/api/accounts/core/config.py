"""
Core configuration settings for the accounts service
"""
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """Application settings with validation"""
    
    # App settings
    APP_NAME: str = "Accounts Service"
    DEBUG: bool = False
    NODE_ENV: str = "development"
    
    # Database settings
    DATABASE_URL_ASYNC: str
    DATABASE_POOL_SIZE: int = 10
    DATABASE_MAX_OVERFLOW: int = 20
    
    # Security settings
    BCRYPT_SALT_ROUNDS: int = 10
    
    # Avatars are stored as raw bytes and rendered as data URIs on read
    AVATAR_MIME_TYPE: str = "image/jpeg"
    
    # Monitoring settings
    LOG_LEVEL: str = "INFO"
    
    @field_validator("NODE_ENV")
    def validate_node_env(cls, v):
        if v not in ["development", "staging", "production"]:
            raise ValueError("NODE_ENV must be one of: development, staging, production")
        return v
    
    @field_validator("BCRYPT_SALT_ROUNDS")
    def validate_salt_rounds(cls, v):
        # bcrypt accepts cost factors 4..31
        if not 4 <= v <= 31:
            raise ValueError("BCRYPT_SALT_ROUNDS must be between 4 and 31")
        return v
    
    @field_validator("LOG_LEVEL")
    def validate_log_level(cls, v):
        if v not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError("LOG_LEVEL must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return v
    
    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"
    
    @property
    def is_development(self) -> bool:
        return self.NODE_ENV == "development"
    
    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL_ASYNC.startswith("sqlite")


# Create settings instance with validation
settings = Settings()