from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="WORDFREQ_")

    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "logs/wordfreq.log"   # vacío = sin archivo de log
    LOG_BACKUP_COUNT: int = 7             # días de logs rotados que se conservan

settings = Settings()
