# health_care/main.py

import logging
from contextlib import asynccontextmanager
from fastapi import APIRouter, FastAPI, Depends, Request, status
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session
import uvicorn

# --- Local Imports ---
from health_care.logging_config import setup_logging
from health_care.config import Settings, settings as default_settings
from health_care.database import Base, create_db_engine, create_session_factory, get_db
from health_care.exceptions import AppError, InternalServerError, register_exception_handlers
from health_care.schemas.app_schemas import ApiResponse
from health_care.schemas.user_schemas import (
    AdminCreateResult,
    AdminResponse,
    CreateAdminPayload,
    UserResponse,
)
from health_care.services.admin_service import get_admins
from health_care.services.user_service import create_admin

logger = logging.getLogger(__name__)

def get_settings(request: Request) -> Settings:
    return request.app.state.settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings
    setup_logging(settings)

    # --- SETUP DATABASE ---
    logger.info("Connecting to the database...")
    engine = create_db_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
    # This creates the database tables if they don't exist on startup
    Base.metadata.create_all(bind=engine)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    logger.info("Database ready.")
    try:
        yield
    finally:
        logger.info("Disposing database engine.")
        engine.dispose()


api_router = APIRouter(prefix="/api/v1")


# --- USER ENDPOINTS ---
@api_router.post("/users", response_model=ApiResponse[AdminCreateResult], status_code=status.HTTP_200_OK)
def create_admin_user(
    payload: CreateAdminPayload,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Registers a new admin: creates the ADMIN user and its admin profile together.
    """
    try:
        user, admin = create_admin(db, payload, rounds=settings.BCRYPT_ROUNDS)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"An unexpected error occurred while creating an admin: {e}", exc_info=True)
        raise InternalServerError("Failed to create Admin")

    return ApiResponse[AdminCreateResult](
        status=status.HTTP_200_OK,
        message="Admin Created Successfully!",
        data=AdminCreateResult(
            created_user_data=UserResponse.model_validate(user),
            created_admin_data=AdminResponse.model_validate(admin),
        ),
    )


# --- ADMIN ENDPOINTS ---
@api_router.get("/admins", response_model=ApiResponse[list[AdminResponse]], status_code=status.HTTP_200_OK)
def list_admins(request: Request, db: Session = Depends(get_db)):
    """
    Lists admins. `searchTerm` searches name and email; any other query
    parameter must match its admin field exactly.
    """
    try:
        admins = get_admins(db, dict(request.query_params))
    except AppError:
        raise
    except Exception as e:
        logger.error(f"An unexpected error occurred while fetching admins: {e}", exc_info=True)
        raise InternalServerError("Failed to fetch Admins")

    return ApiResponse[list[AdminResponse]](
        status=status.HTTP_200_OK,
        message="Admins Fetched Successfully!",
        data=[AdminResponse.model_validate(admin) for admin in admins],
    )


def create_app(settings: Settings = None) -> FastAPI:
    """Builds the FastAPI application for the given settings."""
    settings = settings or default_settings

    # --- Create FastAPI app instance ---
    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    @app.get("/", status_code=status.HTTP_200_OK)
    def root():
        return {"message": "The server is started"}

    app.include_router(api_router)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("health_care.main:app", host=default_settings.HOST, port=default_settings.PORT)
