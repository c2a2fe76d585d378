import logging
from contextlib import asynccontextmanager
from typing import Optional
from dotenv import load_dotenv
load_dotenv()  # Load .env file for local development

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from marks_memo_verifier import MarksMemoVerifier, create_verifier
from fixtures import load_students
from src.config import (
    CORS_ALLOW_ORIGINS,
    GOOGLE_API_KEY,
    SIMULATED_DELAY_SECONDS,
    VERIFICATION_MODEL,
)
from src.exceptions import register_exception_handlers
from src.models import Student
from src.routers import (
    health_router,
    session_router,
    students_router,
    donors_router,
    documents_router,
)
from src.state import AppState

logger = logging.getLogger(__name__)


def create_app_state() -> AppState:
    """Fresh state seeded with the demo students."""
    students = [Student.model_validate(s) for s in load_students()]
    return AppState(students=students)


def create_app(
    state: Optional[AppState] = None,
    verifier: Optional[MarksMemoVerifier] = None,
) -> FastAPI:
    """
    Build the FastAPI app.

    Tests pass their own state and verifier; otherwise both are created on
    startup from fixtures and configuration.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Create the application state and verifier on startup."""
        app.state.app_state = state or create_app_state()
        app.state.verifier = verifier or create_verifier(
            api_key=GOOGLE_API_KEY,
            model=VERIFICATION_MODEL,
            simulated_delay_seconds=SIMULATED_DELAY_SECONDS,
        )
        logger.info(
            f"Scholar Connect started: {len(app.state.app_state.students)} students, "
            f"verification mode {app.state.verifier.mode}"
        )
        yield

    app = FastAPI(title="Scholar Connect", lifespan=lifespan)

    # Lifespan does not run under every test transport, so set eagerly too
    if state is not None:
        app.state.app_state = state
    if verifier is not None:
        app.state.verifier = verifier

    # CORS middleware for the student/donor web frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(session_router)
    app.include_router(students_router)
    app.include_router(donors_router)
    app.include_router(documents_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app:app", host="0.0.0.0", port=8080, reload=True)
