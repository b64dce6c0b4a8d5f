from .requests import DropApiClient, DropApiError, Record

__all__ = [
    "DropApiClient",
    "DropApiError",
    "Record",
]
