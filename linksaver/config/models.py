from pydantic import BaseModel, Field


class AppRules(BaseModel):
    title: str = "linksaver"
    default_screen: str = "links"


class StorageRules(BaseModel):
    db_path: str = "linksaver.db"
    data_dir: str = "."
    avatars_dir: str = "avatars"
    preferences_file: str = "preferences.json"


class AuthRules(BaseModel):
    password_min_length: int = Field(default=6, ge=1)


class LoggingRules(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseModel):
    app: AppRules = Field(default_factory=AppRules)
    storage: StorageRules = Field(default_factory=StorageRules)
    auth: AuthRules = Field(default_factory=AuthRules)
    logging: LoggingRules = Field(default_factory=LoggingRules)
