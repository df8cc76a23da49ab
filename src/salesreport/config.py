from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    output_bucket: str = "bucket-sample-lambda-pdf"
    aws_region: str | None = None
    presign_expiry_seconds: int = 3600  # 1 hour
    report_prefix: str = "relatorio"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
