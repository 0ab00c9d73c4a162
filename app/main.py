from fastapi import FastAPI
from app.core.config import settings
from app.core.logger import init_logging, get_logger
from app.v1.app import v1_app, V1_PREFIX

init_logging()
logger = get_logger(__name__)

app = FastAPI(title=settings.PROJECT_NAME, docs_url=None, redoc_url=None)
app.mount(V1_PREFIX, v1_app)


@app.get("/health", include_in_schema=False)
async def health():
    return {"status": "ok"}


logger.info("%s configured (ENV=%s)", settings.PROJECT_NAME, settings.ENV)
