import re
from typing import Annotated, Any
from fastapi import Path
from pydantic import BeforeValidator
from pydantic_core import PydanticCustomError

MAX_ID = 999_999_999

_DIGITS = re.compile(r'\+?[0-9]+')

def _digits_only(value: Any) -> Any:
    """Reject anything but plain decimal digits before int parsing ("1_0", "1.0", " 1")"""
    if isinstance(value, str) and not _DIGITS.fullmatch(value):
        raise PydanticCustomError('int_parsing', 'Input should be a valid integer, unable to parse string as an integer')
    return value

ResourceId = Annotated[int, BeforeValidator(_digits_only)]

GameId = Annotated[ResourceId, Path(gt=0, le=MAX_ID, description="Positive integer of at most 9 digits")]
PlayerId = Annotated[ResourceId, Path(gt=0, le=MAX_ID, description="Positive integer of at most 9 digits")]
# Length is checked by the handler after trimming
PlayerName = Annotated[str, Path(description="Player name, case-insensitive, at most 15 characters")]
