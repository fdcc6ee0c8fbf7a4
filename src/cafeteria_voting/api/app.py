"""FastAPI application factory."""

from fastapi import FastAPI

from cafeteria_voting.api.admin import router as admin_router
from cafeteria_voting.api.auth import router as auth_router
from cafeteria_voting.api.errors import register_exception_handlers
from cafeteria_voting.api.menu_items import router as menu_items_router
from cafeteria_voting.api.votes import router as votes_router
from cafeteria_voting.api.voting_sessions import router as voting_sessions_router
from cafeteria_voting.app_logging import configure_logging
from cafeteria_voting.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)

    app = FastAPI(title="Cafeteria Voting")
    app.state.container = container

    register_exception_handlers(app)
    app.include_router(auth_router)
    app.include_router(menu_items_router)
    app.include_router(voting_sessions_router)
    app.include_router(votes_router)
    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
