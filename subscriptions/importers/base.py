from __future__ import annotations

from abc import ABC, abstractmethod


class BaseSubscriptionImporter(ABC):
    @abstractmethod
    def parse(self, file_bytes: bytes) -> list[str]:
        """Parse subscription export bytes into channel ids, in file order."""
        raise NotImplementedError
