"""
Metrik Intake Chat - FastAPI application serving the lead-qualification chat agent.
Forwards conversation transcripts to the hosted LLM and returns its reply.
"""
from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from config import Config
from models.api_models import ErrorResponse
from routes import chat
from utils.constants import ErrorMessages
from utils.http_client import HTTPClientManager
from utils.logger import app_logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    app_logger.info(f"{Config.APP_TITLE} starting, model={Config.LLM_MODEL}")
    yield
    await HTTPClientManager.close_all()

app = FastAPI(title=Config.APP_TITLE, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    """Render 405s from the router with the same body as the chat handler"""
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        app_logger.warning(f"Rejected {request.method} {request.url.path}")
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=ErrorMessages.METHOD_NOT_ALLOWED).model_dump(),
            headers=exc.headers,
        )
    return await http_exception_handler(request, exc)


#root endpoint
@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {"message": f"{Config.APP_TITLE} is running"}

app.include_router(chat.router, tags=["chat"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
