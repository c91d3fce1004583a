from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    methodology_path: str = ""  # empty = bundled pilar18_v1.json
    log_level: str = "INFO"
    allowed_origins: list[str] = ["http://localhost:5000"]

    class Config:
        env_file = ".env"
        env_prefix = "AISG_"
