import pytest

from cubcaster.errors import CubError, MapError, TextureError
from cubcaster.identifiers import check_valid_chars, parse_identifiers


def test_map_error_caught_as_cub_error():
    with pytest.raises(CubError) as excinfo:
        check_valid_chars(["111", "101", "111"])
    assert isinstance(excinfo.value, MapError)
    assert str(excinfo.value) == "Invalid map(no player)!"


def test_map_error_is_not_texture_error():
    with pytest.raises(MapError) as excinfo:
        parse_identifiers(["NO a b c\n"])
    assert not isinstance(excinfo.value, TextureError)
    assert str(excinfo.value) == "Type identifier error"


def test_texture_error_keeps_message():
    error = TextureError("Coudn't open wall textures")
    assert error.args == ("Coudn't open wall textures",)
    with pytest.raises(CubError, match="wall textures"):
        raise error