from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable


class BaseRemoteFileManager(ABC):
    @abstractmethod
    async def fetch_remote_file(self, on_complete: Callable[[bytes], None]) -> None:
        """Fetch the remote document and pass its bytes to on_complete. Never called on failure."""
        raise NotImplementedError
