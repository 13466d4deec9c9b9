# --- Pydantic Models ---
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator
from typing import Optional

TITLE_MIN, TITLE_MAX = 2, 50
GENRE_MIN, GENRE_MAX = 2, 20

class GameInput(BaseModel):
    model_config = ConfigDict(extra='forbid')

    title: str = Field(..., min_length=TITLE_MIN, max_length=TITLE_MAX)
    genre: str = Field(..., min_length=GENRE_MIN, max_length=GENRE_MAX)

class GameUpdate(BaseModel):
    """
    Partial update. An absent field or an empty string means "keep the stored value".

    Fields are typed `str` with a None default: defaults are not validated, so
    an omitted field stays None while an explicit null fails as a type error.
    """
    model_config = ConfigDict(extra='forbid')

    title: str = Field(None, max_length=TITLE_MAX)
    genre: str = Field(None, max_length=GENRE_MAX)

    @field_validator('title', 'genre')
    @classmethod
    def validate_min_length(cls, v: Optional[str], info: ValidationInfo):
        minimum = TITLE_MIN if info.field_name == 'title' else GENRE_MIN
        if v and len(v) < minimum:
            raise ValueError(f'{info.field_name.capitalize()} must contain at least {minimum} characters')
        return v

    @model_validator(mode='after')
    def require_one_field(self):
        if not self.model_fields_set:
            raise ValueError('At least one field must be provided for update')
        return self

class Game(BaseModel):
    id: int
    title: str
    genre: str

class GenrePlays(BaseModel):
    genre: str
    plays: int
