import logging

from fastapi import FastAPI

from montyhall.api.deps import init_game_store
from montyhall.api.routes import router
from montyhall.config import get_log_level

app = FastAPI(title="lets-make-a-deal", version="0.1.0")
app.include_router(router)
# Configure logging
logging.basicConfig(level=get_log_level())
logger = logging.getLogger(__name__)


@app.on_event("startup")
async def _startup() -> None:
    init_game_store()


@app.get("/info")
async def info() -> dict[str, str]:
    return {"name": "lets-make-a-deal", "version": "0.1.0"}
