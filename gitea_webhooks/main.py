import logging

from fastapi import FastAPI

from gitea_webhooks.config import settings
from gitea_webhooks.feature_webhook.routes import router as webhook_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

app = FastAPI(title=settings.APP_TITLE)
app.include_router(webhook_router)
