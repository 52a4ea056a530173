from typing import Any, Type, TypeVar
from dataclasses import dataclass
import json
import logging

from pydantic import BaseModel
from pydantic_core import to_jsonable_python

logger = logging.getLogger(__name__)

T = TypeVar("T")

@dataclass
class Rectangle:
    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height

def get_json(obj: Any) -> str:
    """
    Return the compact JSON representation of a value.

    Dataclasses, pydantic models and other non-native values are reduced
    to plain data by pydantic before encoding.

    Examples:
        [1, 2, 3] => '[1,2,3]'
        Rectangle(10, 20) => '{"width":10,"height":20}'
    """
    return json.dumps(
        obj,
        separators=(",", ":"),
        ensure_ascii=False,
        default=to_jsonable_python,
    )

def from_json(shape: Type[T], json_string: str) -> T:
    """
    Decode JSON onto an instance of the given class.

    Args:
        shape: Class whose methods the result should carry
        json_string: JSON object text holding the data fields

    Returns:
        Instance of shape with the decoded fields as attributes

    Raises:
        json.JSONDecodeError: If json_string is not valid JSON
        TypeError: If the decoded value is not a JSON object
    """
    data = json.loads(json_string)
    if not isinstance(data, dict):
        raise TypeError(
            f"Expected a JSON object for {shape.__name__}, got {type(data).__name__}"
        )

    if isinstance(shape, type) and issubclass(shape, BaseModel):
        return shape.model_validate(data)

    # Bypass __init__; fields come from the payload, not the constructor.
    instance = shape.__new__(shape)
    for key, value in data.items():
        object.__setattr__(instance, key, value)
    logger.debug(f"Restored {shape.__name__} with fields {list(data)}")
    return instance
