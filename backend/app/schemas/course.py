import math
from pydantic import BaseModel, ConfigDict, field_validator
from typing import Any, Optional, Union
from datetime import datetime


def coerce_price(value: Any) -> Union[int, float]:
    """Turn any submitted price into a number, falling back to 0"""
    if isinstance(value, bool):
        return int(value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if math.isnan(number) or math.isinf(number):
        return 0
    return int(number) if number.is_integer() else number


class CourseCreate(BaseModel):
    title: Any = None
    description: Any = None
    level: Any = None
    price: Union[int, float] = 0
    image_url: Any = None

    @field_validator("price", mode="before")
    @classmethod
    def parse_price(cls, value: Any) -> Union[int, float]:
        return coerce_price(value)

    @field_validator("image_url", mode="before")
    @classmethod
    def empty_image_is_null(cls, value: Any) -> Any:
        return value or None


class CourseUpdate(BaseModel):
    """Partial course update; fields not declared here are passed through"""

    model_config = ConfigDict(extra="allow")

    title: Any = None
    description: Any = None
    level: Any = None
    price: Optional[Union[int, float]] = None
    image_url: Any = None

    @field_validator("price", mode="before")
    @classmethod
    def parse_price(cls, value: Any) -> Optional[Union[int, float]]:
        # explicit null clears the price
        if value is None:
            return None
        return coerce_price(value)


class CourseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, extra="allow")

    id: Union[int, str]
    title: Any = None
    description: Any = None
    level: Any = None
    price: Optional[Union[int, float]] = None
    image_url: Any = None
    created_at: Optional[datetime] = None
