from datetime import datetime
from math import ceil
from pydantic import AfterValidator, AliasChoices, BaseModel, Field
from typing import Annotated, Any, Dict, Generic, List, Optional, TypeVar

from shared.core.config import settings
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from shared.helpers.date_helper import to_naive_utc

# Shared properties
T = TypeVar("T")

# incoming timestamps are normalised to naive UTC before they reach the database
UtcDateTime = Annotated[datetime, AfterValidator(to_naive_utc)]


class UserToken(BaseModel):
    user_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    role: str
    permissions: List[str] = []
    status: Optional[str] = None
    exp: Optional[int] = None


class CommonQueryParams(EmptyStringModel):
    search: Optional[str] = None
    page: int = Field(1, ge=1)
    per_page: int = Field(settings.DEFAULT_PER_PAGE, ge=1, le=settings.MAX_PER_PAGE)


class OrmModel(BaseModel):
    model_config = {"from_attributes": True}


class MetadataOrmModel(OrmModel):
    # ORM rows keep the JSON column on `meta`; payloads call it `metadata`
    metadata: Optional[Dict[str, Any]] = Field(
        None, validation_alias=AliasChoices("meta", "metadata"))


class JsonOutResult(BaseModel, Generic[T]):
    success: bool
    message: str
    data: Optional[T] = None


class PaginatedResult(BaseModel, Generic[T]):
    items: List[T]
    total: int
    page: int
    per_page: int
    pages: int

    @classmethod
    def build(cls, items: List[Any], total: int, page: int, per_page: int) -> "PaginatedResult":
        return cls(
            items=items,
            total=total,
            page=page,
            per_page=per_page,
            pages=ceil(total / per_page) if per_page else 0,
        )


class StatusUpdate(BaseModel):
    # plain str so the service can answer out-of-enum values with a field error
    status: str


class MaintenanceStatistics(BaseModel):
    total_maintenance: int = 0
    total_cost: float = 0.0
    average_cost: float = 0.0

