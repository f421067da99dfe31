# Copyright (c) 2024 Movie Comments API Contributors
# SPDX-License-Identifier: MIT

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app_state import AppState
from config import default_config
from startup.manager import StartupManager
from routes.health import router as health_router
from routes.movies import router as movies_router
from routes.comments import router as comments_router

# Global state
state = AppState(default_config)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan"""
    manager = StartupManager(app.state.app_state)
    await manager.initialize()
    yield
    await manager.shutdown()


app = FastAPI(
    title="Movie Comments API",
    description="Movie lookup and comments over a MongoDB document store",
    version="0.1.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=default_config.server.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are client faults: 400 with the usual detail shape"""
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


# Store state in app for route access
app.state.app_state = state

app.include_router(health_router)
app.include_router(movies_router)
app.include_router(comments_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=default_config.server.host, port=default_config.server.port)
