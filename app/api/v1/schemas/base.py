from typing import Generic, TypeVar

from app.shared.api.utils import ApiSuccess

T = TypeVar("T")


class ApiOut(ApiSuccess, Generic[T]):
    """Success envelope returned by v1 routers."""

    results: T  # type: ignore[valid-type]
