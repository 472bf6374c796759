from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional, List, Union
from datetime import datetime

class CamelModel(BaseModel):
    """camelCase JSON 으로 주고받는 기본 스키마"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True
    )

class FieldErrorDetail(BaseModel):
    field: str
    message: str

class ErrorResponse(CamelModel):
    """공통 오류 응답"""
    status_code: int
    message: Union[str, List[FieldErrorDetail]]
    error: Optional[str] = None
    timestamp: datetime
