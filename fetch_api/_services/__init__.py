from ._base_service import BaseService
from .api_client import ApiClient

__all__ = [
    "BaseService",
    "ApiClient",
]
