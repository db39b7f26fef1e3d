# 📄 File: favorites_tracker/modules/favorites/infrastructure/supabase/storage_repository_impl.py

# 🧭 Purpose (Layman Explanation):
# Uploads photos to Supabase cloud storage (after checking they really are images and not
# too big), deletes them, and downloads them again from their web address.

# 🧪 Purpose (Technical Summary):
# Concrete StorageRepository over a Supabase Storage bucket. Uploads are size-checked and
# verified with Pillow, content type is inferred from the decoded image format, and the
# bucket public URL is returned. Downloads use aiohttp with a configurable timeout.

# 🔗 Dependencies:
# - supabase: Storage client (via SupabaseManager)
# - PIL (Pillow): Image verification
# - aiohttp: Image download
# - supabase/errors.py: error translation and call logging

# 🔄 Connected Modules / Calls From:
# RepositoryProvider.storage_repository

import io
from typing import Callable, Optional

import aiohttp
from PIL import Image, UnidentifiedImageError

from favorites_tracker.shared.config.settings import Settings
from favorites_tracker.shared.config.supabase import SupabaseManager
from favorites_tracker.shared.core.exceptions import ValidationError

from ...domain.repositories.storage_repository import StorageRepository
from .errors import backend_call

DEFAULT_CONTENT_TYPE = "application/octet-stream"


class SupabaseStorageRepository(StorageRepository):
    """Supabase Storage implementation of the StorageRepository interface."""

    repository_name = "SupabaseStorageRepository"

    def __init__(
        self,
        supabase_manager: SupabaseManager,
        settings: Optional[Settings] = None,
        session_factory: Callable[..., aiohttp.ClientSession] = aiohttp.ClientSession
    ):
        self._manager = supabase_manager
        self.settings = settings or supabase_manager.settings
        self.bucket_name = self.settings.SUPABASE_STORAGE_BUCKET
        self.max_image_size = self.settings.MAX_IMAGE_SIZE_BYTES
        self._session_factory = session_factory

    def _bucket(self):
        return self._manager.get_storage_client(self.bucket_name)

    def _call(self, operation: str):
        return backend_call(self.repository_name, operation, "image")

    def _validate_image(self, data: bytes) -> str:
        """
        Check size and decodability.

        Returns:
            Content type inferred from the image format

        Raises:
            ValidationError: If the data is empty, too large or not an image
        """
        if not data:
            raise ValidationError(message="Image data is empty", field="data", constraint="non_empty")

        if len(data) > self.max_image_size:
            raise ValidationError(
                message=f"Image size {len(data)} exceeds maximum {self.max_image_size} bytes",
                field="data",
                constraint="max_size"
            )

        try:
            with Image.open(io.BytesIO(data)) as img:
                image_format = img.format
                img.verify()
        except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as e:
            raise ValidationError(message=f"Invalid image file: {e}", field="data") from e

        return Image.MIME.get(image_format or "", DEFAULT_CONTENT_TYPE)

    async def upload_image(self, data: bytes, path: str) -> str:
        content_type = self._validate_image(data)

        with self._call("upload_image"):
            bucket = self._bucket()
            bucket.upload(
                path=path,
                file=data,
                file_options={
                    "content-type": content_type,
                    "cache-control": "3600",
                    "upsert": "true"
                }
            )
            public_url = bucket.get_public_url(path)

        return public_url

    async def delete_image(self, path: str) -> None:
        with self._call("delete_image"):
            self._bucket().remove([path])

    async def download_image(self, url: str) -> bytes:
        timeout = aiohttp.ClientTimeout(total=self.settings.IMAGE_DOWNLOAD_TIMEOUT)
        with self._call("download_image"):
            async with self._session_factory(timeout=timeout) as session:
                async with session.get(url) as response:
                    response.raise_for_status()
                    return await response.read()
