import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from stress_interview.api import chat
from stress_interview.core.config import log_level
from stress_interview.core.cors import CORS_HEADERS, cors_middleware

logging.basicConfig(level=log_level(), format="[%(asctime)s] %(levelname)s %(name)s - %(message)s")
logger = logging.getLogger("stress_interview")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pooled client for every outbound gateway call
    async with httpx.AsyncClient() as client:
        app.state.http_client = client
        yield


app = FastAPI(title="Stress Interview Relay", lifespan=lifespan)

app.middleware("http")(cors_middleware)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    # Runs outside the CORS middleware, so the headers are attached here
    logger.exception("Interview chat error: %s", exc)
    return JSONResponse(
        status_code=500,
        content={"error": "Failed to process request"},
        headers=CORS_HEADERS,
    )


app.include_router(chat.router, tags=["interview"])


@app.get("/")
def root():
    return {"message": "Stress Interview Relay Running"}


@app.get("/health")
def health():
    return {"status": "ok"}
