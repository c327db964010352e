"""
재사용 가능한 공통 스키마.
"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Generic, TypeVar, List


T = TypeVar('T')


class CamelModel(BaseModel):
    """JSON 키는 camelCase, 입력은 snake_case 도 허용."""

    model_config = {
        "from_attributes": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class PaginatedResponse(CamelModel, Generic[T]):
    """페이지 단위 응답."""

    items: List[T]
    total: int
    page: int
    limit: int
    total_pages: int
    has_more: bool = False

    def __init__(self, **data):
        super().__init__(**data)
        self.has_more = self.page < self.total_pages

