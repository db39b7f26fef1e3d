# 📄 File: favorites_tracker/main.py
#
# 🧭 Purpose (Layman Explanation):
# Starts FavoritesTracker up: turns on logging, connects every "job" (items, collections,
# sign-in, photos) to the service that does it, and tidies everything up on the way out.
#
# 🧪 Purpose (Technical Summary):
# Application context owning the settings, the service container and the repository
# provider. start() configures logging and registers production dependencies (optionally
# freezing the container); close() clears bindings and releases Supabase clients.
# Usable as a sync or async context manager, or through the lifespan() helper.
#
# 🔗 Dependencies:
# - favorites_tracker.shared.config.settings
# - favorites_tracker.shared.core.container
# - favorites_tracker.shared.utils.logging
# - favorites_tracker.modules.favorites.assembly
#
# 🔄 Connected Modules / Calls From:
# - Host application entry point
# - Integration tests

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from favorites_tracker import __version__
from favorites_tracker.modules.favorites.assembly import register_dependencies
from favorites_tracker.modules.favorites.infrastructure.repository_provider import RepositoryProvider
from favorites_tracker.shared.config.settings import Settings, get_settings
from favorites_tracker.shared.core.container import ServiceContainer, get_container
from favorites_tracker.shared.utils.logging import (
    get_logger,
    log_shutdown_event,
    log_startup_event,
    setup_logging,
)

logger = get_logger(__name__)


class ApplicationContext:
    """
    Owns the process wiring for FavoritesTracker.

    Example:
        with ApplicationContext() as context:
            items = context.container.resolve(ItemRepository)
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        container: Optional[ServiceContainer] = None,
        provider: Optional[RepositoryProvider] = None
    ):
        self.settings = settings or get_settings()
        self.container = container if container is not None else get_container()
        self.provider = provider if provider is not None else RepositoryProvider(settings=self.settings)
        self._started = False

    @property
    def is_started(self) -> bool:
        return self._started

    def start(self) -> "ApplicationContext":
        """Configure logging and register production dependencies. Idempotent."""
        if self._started:
            return self

        setup_logging(self.settings)
        log_startup_event(
            self.settings.APP_NAME,
            __version__,
            extra={'environment': self.settings.ENVIRONMENT}
        )

        try:
            register_dependencies(self.container, self.provider)
            if self.settings.FREEZE_CONTAINER_ON_STARTUP:
                self.container.freeze()
        except Exception as e:
            logger.error(f"❌ Startup failed: {e}", exc_info=True)
            raise

        self._started = True
        logger.info(f"✅ {self.settings.APP_NAME} startup complete")
        return self

    def close(self) -> None:
        """Clear container bindings and release constructed repositories."""
        if not self._started:
            return

        log_shutdown_event(self.settings.APP_NAME)
        try:
            self.container.clear()
            self.provider.reset()
            logger.info(f"✅ {self.settings.APP_NAME} shutdown complete")
        except Exception as e:
            logger.error(f"❌ Error during shutdown: {e}", exc_info=True)
        finally:
            self._started = False

    def __enter__(self) -> "ApplicationContext":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    async def __aenter__(self) -> "ApplicationContext":
        return self.start()

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.close()


@asynccontextmanager
async def lifespan(context: Optional[ApplicationContext] = None) -> AsyncGenerator[ApplicationContext, None]:
    """
    Application lifespan context manager.

    Handles startup and shutdown for a host application (for example an ASGI
    server's lifespan hook).
    """
    context = context or ApplicationContext()
    logger.info("🌱 FavoritesTracker starting up...")
    context.start()
    try:
        yield context
    finally:
        logger.info("🔄 FavoritesTracker shutting down...")
        context.close()
