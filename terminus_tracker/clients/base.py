"""Base client interface for activity platforms."""

from abc import ABC, abstractmethod
from typing import List, Dict, Any


class BaseClient(ABC):
    """Abstract base class for activity platform clients."""

    @abstractmethod
    def refresh_access_token(self, client_id: str, client_secret: str, refresh_token: str) -> str:
        """Exchange stored credentials for a bearer token."""
        pass

    @abstractmethod
    def get_activities_page(self, token: str, page: int) -> List[Dict[str, Any]]:
        """Get one page of activities."""
        pass
