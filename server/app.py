"""FastAPI web server for the todo API."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Path, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr, field_validator

from todo_api import __version__
from todo_api.config import get_settings
from todo_api.db.database import Database, StoreError
from todo_api.db.todo_repo import EmptyUpdateError, TodoRepository

logger = logging.getLogger(__name__)


# Largest id SQLite can bind as INTEGER
MAX_TODO_ID = 2**63 - 1


def _require_utf8(value: Optional[str]) -> Optional[str]:
    # json.loads lets lone surrogates through; sqlite3 cannot bind them
    if value is not None:
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ValueError("text is not valid UTF-8") from e
    return value


# Request/Response Models
class TodoCreate(BaseModel):
    author: StrictStr
    body: StrictStr

    @field_validator("author", "body")
    @classmethod
    def check_utf8(cls, value: Optional[str]) -> Optional[str]:
        return _require_utf8(value)


class TodoUpdate(BaseModel):
    id: StrictInt = Field(ge=0, le=MAX_TODO_ID)
    author: Optional[StrictStr] = None
    body: Optional[StrictStr] = None
    done: Optional[StrictBool] = None

    @field_validator("author", "body")
    @classmethod
    def check_utf8(cls, value: Optional[str]) -> Optional[str]:
        return _require_utf8(value)


class TodoOut(BaseModel):
    id: int
    author: str
    body: str
    done: bool


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the store on startup unless one was supplied to ``create_app``."""
    owned = app.state.db is None
    if owned:
        db = Database(path=get_settings().DATABASE_PATH)
        db.init()
        app.state.db = db
    logger.info(f"Server started - DB: {app.state.db.path}")
    yield

    if owned:
        app.state.db.close()
        app.state.db = None
    logger.info("Server shutting down")


def get_todo_repo(request: Request) -> TodoRepository:
    db: Optional[Database] = request.app.state.db
    if db is None:
        raise HTTPException(status_code=503, detail="Database not initialized")
    return TodoRepository(db)


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": "Bad Request"})


async def _store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.error(f"Store failure on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal Server Error"},
    )


# API Routes
router = APIRouter(tags=["todos"])


@router.get("/todos", response_model=list[TodoOut])
def list_todos(repo: TodoRepository = Depends(get_todo_repo)):
    """List every todo in store order."""
    return [t.to_dict() for t in repo.list_all()]


@router.post("/todos", status_code=status.HTTP_201_CREATED)
def create_todo(todo: TodoCreate, repo: TodoRepository = Depends(get_todo_repo)):
    """Create a todo; the store assigns its id."""
    repo.create(todo.author, todo.body)
    return Response(status_code=status.HTTP_201_CREATED)


@router.patch("/todos")
def update_todo(todo: TodoUpdate, repo: TodoRepository = Depends(get_todo_repo)):
    """Replace any of author, body and done on the todo with ``id``."""
    try:
        repo.update(todo.id, author=todo.author, body=todo.body, done=todo.done)
    except EmptyUpdateError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/todos/{todo_id}")
def delete_todo(
    todo_id: int = Path(ge=0, le=MAX_TODO_ID),
    repo: TodoRepository = Depends(get_todo_repo),
):
    """Delete the todo with ``id``; unknown ids are not an error."""
    repo.delete(todo_id)
    return Response(status_code=status.HTTP_200_OK)


def create_app(db: Optional[Database] = None) -> FastAPI:
    """Build the application, optionally bound to an already-initialised Database."""
    app = FastAPI(
        title="Todo API",
        description="CRUD over a single SQLite todos table",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.db = db

    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(StoreError, _store_error_handler)

    app.include_router(router)
    return app


app = create_app()
