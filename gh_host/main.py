import logging

from fastapi import FastAPI

from gh_host.routers import dispatch
from gh_host.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="gh-host API", description="Blog workflow dispatcher")

app.include_router(dispatch.router)


@app.get("/")
async def root():
    return {"message": "gh-host API is running"}
