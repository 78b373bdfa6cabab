# app/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.common.exceptions import FriendGraphError
from app.core.logger import configure_logging
from app.db.base_class import Base
from app.db.session import engine

# models must be imported so their tables are on Base.metadata
from app.models.user import User  # noqa: F401
from app.models.friendship import Friendship  # noqa: F401

from app.routers import friendship_request, my_friend, user

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    # create missing tables on startup
    Base.metadata.create_all(bind=engine)
    yield


def create_app() -> FastAPI:
    app = FastAPI(title="Friend Graph API", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(FriendGraphError)
    async def friend_graph_exception_handler(request: Request, exc: FriendGraphError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.__class__.__name__)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    app.include_router(user.router, prefix="/api/v1/users", tags=["users"])
    app.include_router(my_friend.router, prefix="/api/v1/my-friends", tags=["my-friends"])
    app.include_router(
        friendship_request.router,
        prefix="/api/v1/friendship-requests",
        tags=["friendship-requests"],
    )

    @app.get("/")
    def read_root():
        return {"message": "Friend Graph API is running!"}

    return app


app = create_app()
