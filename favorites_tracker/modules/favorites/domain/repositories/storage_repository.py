# 📄 File: favorites_tracker/modules/favorites/domain/repositories/storage_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for uploading, removing and downloading photos.
# 🧪 Purpose (Technical Summary):
# Repository interface for binary image storage addressed by path (write) and URL (read).
# 🔗 Dependencies:
# typing, abc
# 🔄 Connected Modules / Calls From:
# Supabase storage implementation, in-memory storage fake, service assembly

from abc import ABC, abstractmethod


class StorageRepository(ABC):
    """Repository interface for image storage."""

    @abstractmethod
    async def upload_image(self, data: bytes, path: str) -> str:
        """
        Upload image bytes.

        Args:
            data: Encoded image bytes
            path: Destination path inside the storage bucket

        Returns:
            Public URL of the stored image

        Raises:
            ValidationError: If the data is not an acceptable image
        """
        pass

    @abstractmethod
    async def delete_image(self, path: str) -> None:
        """
        Delete a stored image.

        Args:
            path: Path inside the storage bucket
        """
        pass

    @abstractmethod
    async def download_image(self, url: str) -> bytes:
        """
        Download image bytes.

        Args:
            url: URL previously returned by upload_image

        Returns:
            Raw image bytes

        Raises:
            NotFoundError: If nothing is stored at the URL
            ServiceUnavailableError: If the storage backend cannot be reached
        """
        pass
