"""
Shared configuration for movie master services
"""
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AWSConfig(BaseSettings):
    """AWS configuration"""
    region: str = Field("us-east-1")
    dynamodb_endpoint_url: Optional[str] = Field(None)  # DynamoDB Local, e.g. http://localhost:8000
    table_name: str = Field("MovieMaster")

    model_config = SettingsConfigDict(env_prefix="AWS_")


class AppConfig(BaseSettings):
    """Application configuration"""
    name: str = Field("movie-master-api")
    version: str = Field("1.0.0")
    environment: str = Field("dev")
    log_level: str = Field("INFO")
    debug: bool = Field(False)
    host: str = Field("0.0.0.0")
    port: int = Field(3000)

    model_config = SettingsConfigDict(env_prefix="APP_")


class Config:
    """Main configuration class"""

    def __init__(self):
        self.app = AppConfig()
        self.aws = AWSConfig()


# Global config instance
config = Config()
