import pytest
from pydantic import TypeAdapter, ValidationError

from app.models.game import GameInput, GameUpdate
from app.models.params import ResourceId
from app.models.player import PlayerInput


def test_game_update_accepts_empty_strings():
    update = GameUpdate.model_validate({"title": "", "genre": "Arcade"})
    assert update.title == ""
    assert update.genre == "Arcade"


def test_game_update_short_non_empty_value_rejected():
    with pytest.raises(ValidationError) as exc_info:
        GameUpdate.model_validate({"genre": "A"})
    error = exc_info.value.errors()[0]
    assert error["loc"] == ("genre",)
    assert "at least 2 characters" in error["msg"]


def test_game_update_requires_a_field():
    with pytest.raises(ValidationError, match="At least one field"):
        GameUpdate.model_validate({})


def test_game_update_rejects_unknown_field():
    with pytest.raises(ValidationError):
        GameUpdate.model_validate({"rating": 5})


def test_game_update_length_cap():
    with pytest.raises(ValidationError):
        GameUpdate.model_validate({"title": "x" * 51})


def test_game_input_collects_all_violations():
    with pytest.raises(ValidationError) as exc_info:
        GameInput.model_validate({"title": "x", "genre": "y" * 21, "extra": True})
    assert {e["type"] for e in exc_info.value.errors()} == {
        "string_too_short",
        "string_too_long",
        "extra_forbidden",
    }


def test_player_input_does_not_coerce_numbers():
    with pytest.raises(ValidationError):
        PlayerInput.model_validate({"name": 12345})


def test_game_update_rejects_explicit_null():
    with pytest.raises(ValidationError) as exc_info:
        GameUpdate.model_validate({"title": None})
    assert exc_info.value.errors()[0]["type"] == "string_type"


def test_game_update_omitted_field_stays_none():
    update = GameUpdate.model_validate({"genre": "Arcade"})
    assert update.title is None
    assert update.model_fields_set == {"genre"}


@pytest.mark.parametrize("raw", ["1_0", "1.0", " 7", "0x1f"])
def test_resource_id_accepts_digits_only(raw):
    with pytest.raises(ValidationError) as exc_info:
        TypeAdapter(ResourceId).validate_python(raw)
    assert exc_info.value.errors()[0]["type"] == "int_parsing"


def test_resource_id_parses_digits():
    assert TypeAdapter(ResourceId).validate_python("000042") == 42
