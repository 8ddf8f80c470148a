from fastapi import FastAPI, Request, Response
from fastapi.exception_handlers import (
    http_exception_handler,
    request_validation_exception_handler,
)
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from todo_app.api.todos import router as todos_router
from todo_app.config import CORS_ORIGINS
from todo_app.db.store import NotFound, TodoStore


async def not_found_handler(request: Request, exc: NotFound) -> Response:
    return Response(status_code=404, media_type="application/json")


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
    # A method that is not served on a path is treated like an unknown route.
    if exc.status_code == 405:
        return Response(status_code=404, media_type="application/json")
    return await http_exception_handler(request, exc)


async def validation_handler(request: Request, exc: RequestValidationError) -> Response:
    if any(error.get("type") == "json_invalid" for error in exc.errors()):
        return JSONResponse(status_code=400, content={"detail": "Malformed JSON body"})
    return await request_validation_exception_handler(request, exc)


def create_app() -> FastAPI:
    """
    Build the API with its own empty TodoStore.
    """
    app = FastAPI(
        title="Todo API",
        version="0.1.0",
    )
    app.state.store = TodoStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(NotFound, not_found_handler)
    app.add_exception_handler(RequestValidationError, validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    app.include_router(todos_router)
    return app


app = create_app()
