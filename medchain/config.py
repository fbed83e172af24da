"""
Application configuration settings loaded from environment variables.
Uses pydantic_settings for validation and type conversion.
"""
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    """
    Application settings class with environment variable validation.
    
    Attributes:
        database_url: SQLAlchemy connection string for the ledger state
        secret_key: Secret key shared with the identity gateway for JWT verification
        algorithm: Algorithm used for JWT encoding (typically HS256)
        access_token_expire_minutes: Lifetime of tokens issued by the dev token endpoint
        
        # Ledger settings
        admin_address: Address fixed as the single Admin at initialization
        
        # Development settings
        allow_dev_tokens: Whether /api/v1/auth/token may issue tokens
        
        # Service settings
        cors_origins: Origins allowed by the CORS middleware
        log_level: Root logging level
    """
    # Database settings
    database_url: str = "sqlite:///./medchain.db"
    
    # JWT settings
    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 30
    
    # Ledger settings
    admin_address: str
    
    # Development settings
    allow_dev_tokens: bool = False
    
    # Service settings
    cors_origins: List[str] = ["http://localhost:3000"]
    log_level: str = "INFO"

    class Config:
        """Configuration for environment variables loading"""
        env_file = ".env"
        case_sensitive = False

# Create settings instance
settings = Settings()
