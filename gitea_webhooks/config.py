from pydantic_settings import BaseSettings, SettingsConfigDict

from gitea_webhooks.feature_webhook.events import HookEventType


class Settings(BaseSettings):
    APP_TITLE: str = "Gitea Webhooks"
    GITEA_WEBHOOK_SECRET: str = ""
    # Events the receiver accepts; anything else is rejected before the body is read
    GITEA_WEBHOOK_EVENTS: list[str] = [event.value for event in HookEventType]
    LOG_LEVEL: str = "INFO"
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
