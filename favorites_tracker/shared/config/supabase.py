"""
Supabase client configuration for authentication, database and storage services.
Handles lazy Supabase initialization with proper error handling.
"""

import logging
from functools import lru_cache
from typing import Optional

from supabase import Client, create_client
from supabase.lib.client_options import ClientOptions

from favorites_tracker.shared.core.exceptions import NotConfiguredError
from .settings import Settings, get_settings


logger = logging.getLogger(__name__)


class SupabaseManager:
    """
    Supabase client manager with lazy connection handling.
    Provides authentication, database, and storage services.

    The regular client uses the anon key and carries the user session. The admin
    client uses the service role key and is only built when an operation needs it
    (account deletion).
    """

    def __init__(self, settings: Optional[Settings] = None, url: Optional[str] = None):
        self.settings = settings or get_settings()
        self.url = url or self.settings.SUPABASE_URL
        self._client: Optional[Client] = None
        self._admin_client: Optional[Client] = None

    @property
    def client(self) -> Client:
        """Get or create Supabase client with lazy initialization."""
        if self._client is None:
            self._client = self._create_client(self.settings.SUPABASE_ANON_KEY, "SUPABASE_ANON_KEY")
        return self._client

    @property
    def admin_client(self) -> Client:
        """Get or create the service-role Supabase client."""
        if self._admin_client is None:
            self._admin_client = self._create_client(
                self.settings.SUPABASE_SERVICE_ROLE_KEY or "",
                "SUPABASE_SERVICE_ROLE_KEY",
                persist_session=False,
            )
        return self._admin_client

    def _create_client(self, key: str, key_name: str, persist_session: bool = True) -> Client:
        """Create Supabase client with proper configuration."""
        if not key:
            logger.critical(f"Supabase client requested but {key_name} is not set")
            raise NotConfiguredError(
                message=f"{key_name} is required to build the Supabase client",
                capability=key_name
            )

        client_options = ClientOptions(
            schema="public",
            headers={
                "User-Agent": f"FavoritesTracker/{self.settings.APP_VERSION}",
            },
            auto_refresh_token=persist_session,
            persist_session=persist_session,
            postgrest_client_timeout=self.settings.SUPABASE_POSTGREST_TIMEOUT,
            storage_client_timeout=self.settings.SUPABASE_STORAGE_TIMEOUT,
        )

        client = create_client(
            supabase_url=self.url,
            supabase_key=key,
            options=client_options
        )

        logger.info(f"Supabase client initialized for {self.url}")
        return client

    def get_auth_client(self):
        """Get Supabase auth client for authentication operations."""
        return self.client.auth

    def get_storage_client(self, bucket_name: Optional[str] = None):
        """
        Get Supabase storage client for file operations.

        Args:
            bucket_name: Storage bucket name (default: SUPABASE_STORAGE_BUCKET)
        """
        return self.client.storage.from_(bucket_name or self.settings.SUPABASE_STORAGE_BUCKET)

    def table(self, name: str):
        """Start a PostgREST query on a table."""
        return self.client.table(name)

    @property
    def is_initialized(self) -> bool:
        return self._client is not None

    def close(self):
        """Drop cached Supabase clients."""
        if self._client or self._admin_client:
            # Supabase clients hold no sockets that need explicit closing
            self._client = None
            self._admin_client = None
            logger.info("Supabase client connections closed")


@lru_cache()
def get_supabase_manager() -> SupabaseManager:
    """
    Get cached Supabase manager instance.

    Returns:
        SupabaseManager: Singleton Supabase manager
    """
    return SupabaseManager()
