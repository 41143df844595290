from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dashboard.api import auth, display_mode, items
from dashboard.api import dashboard as dashboard_api
from dashboard.core.config import Settings, settings as default_settings
from dashboard.core.logging import setup_logging
from dashboard.services.display_mode import DisplayModeResolver
from dashboard.services.inventory_store import InventoryStore, seed_sample_items
from dashboard.services.preference_storage import JsonFilePreferenceStorage, PreferenceStorage
from dashboard.services.system_signal import ManualSystemSignalSource


def create_app(
    settings: Settings | None = None,
    preference_storage: PreferenceStorage | None = None,
) -> FastAPI:
    settings = settings or default_settings
    logger = setup_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store = InventoryStore()
        if settings.SEED_SAMPLE_ITEMS:
            seed_sample_items(store)

        source = ManualSystemSignalSource(prefers_dark=settings.DEFAULT_SYSTEM_PREFERS_DARK)
        storage = preference_storage or JsonFilePreferenceStorage(settings.PREFERENCE_FILE)
        resolver = DisplayModeResolver(storage, source, storage_key=settings.PREFERENCE_KEY)

        app.state.inventory_store = store
        app.state.signal_source = source
        app.state.display_mode_resolver = resolver
        with resolver:
            logger.info("%s started with %s items", settings.PROJECT_NAME, len(store))
            yield
        logger.info("%s stopped", settings.PROJECT_NAME)

    app = FastAPI(
        title=f"{settings.PROJECT_NAME} API",
        description="Login, inventory items, dashboard summary and display mode",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth.router)
    app.include_router(items.router)
    app.include_router(dashboard_api.router)
    app.include_router(display_mode.router)

    @app.get("/health")
    async def health_check():
        return {"status": "ok", "version": "0.1.0"}

    return app


app = create_app()
