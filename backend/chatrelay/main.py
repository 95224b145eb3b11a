# chatrelay/main.py

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from chatrelay.api import chats, users
from chatrelay.core.config import get_settings
from chatrelay.core.errors import RelayError
from chatrelay.utils.logger import setup_logger

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Chat Relay Backend",
    version="1.0.0",
    description="Relays user messages to an AI model and a chat channel"
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_logger()


@app.exception_handler(RelayError)
async def relay_error_handler(request: Request, exc: RelayError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected malformed body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s", request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


# Register routers
app.include_router(users.router, tags=["Users"])
app.include_router(chats.router, tags=["Chats"])


@app.get("/health")
def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run("chatrelay.main:app", host="0.0.0.0", port=settings.port)
