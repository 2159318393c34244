# server/main.py

import logging
from contextlib import asynccontextmanager
import uvicorn
from fastapi import FastAPI
from api import users, pages
from database import init_db
import config


logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


app = FastAPI(title="DevSecOps Lab App", lifespan=lifespan)

app.include_router(users.router)
app.include_router(pages.router)


def run():
    logger.info("Vulnerable app listening on port %s", config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
