"""Item request/response schemas - REST API contract.

Request fields are optional: missing values pass through to the store, which
decides whether they are acceptable.
"""

from pydantic import BaseModel

from buildstore.schemas.common import LaxStr


class ItemCreate(BaseModel):
    category: LaxStr = None
    description: LaxStr = None
    price: float | None = None


class ItemUpdate(BaseModel):
    description: LaxStr = None
    price: float | None = None


class ItemResponse(BaseModel):
    id: int
    category_id: int | None
    description: str | None
    price: float | None

    model_config = {"from_attributes": True}
