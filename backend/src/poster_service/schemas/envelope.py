"""Success envelope shared by every record endpoint.

    Envelope[T]: {"message": "...", "data": T}

``T`` is a type parameter, so each router declares its own
concrete response model without subclassing::

    # routers/banner.py
    @router.post("/banner", response_model=Envelope[BannerRead], status_code=201)

Routers may pass ORM records straight into ``data``; the record schemas set
``from_attributes`` so Pydantic reads the attributes directly.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    message: str
    data: T
