import pytest

from exifmap.config import ExifMapConfig, load_config
from exifmap.errors import ConfigError


def test_defaults():
    config = load_config()
    assert config == ExifMapConfig()
    assert config.json_indent == 2
    assert config.max_value_length is None
    assert config.ifds == ["0th", "Exif", "GPS", "Interop", "1st"]


def test_top_level_keys(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("map_link = true\nmax_value_length = 40\nunknown = 1\n")
    config = load_config(str(path))
    assert config.map_link
    assert config.max_value_length == 40


def test_table_keys(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[exifmap]\njson_output = true\nlog_level = "DEBUG"\n')
    config = load_config(str(path))
    assert config.json_output
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize(
    "text",
    [
        "json_indent = -1\n",
        "max_value_length = 0\n",
        'ifds = ["Makernote"]\n',
        'log_level = "verbose"\n',
        "this is not toml",
    ],
)
def test_invalid_config(tmp_path, text):
    path = tmp_path / "config.toml"
    path.write_text(text)
    with pytest.raises(ConfigError):
        load_config(str(path))


def test_missing_config(tmp_path):
    with pytest.raises(ConfigError):
        load_config(str(tmp_path / "nope.toml"))


def test_log_level_is_case_insensitive(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('log_level = "debug"\n')
    assert load_config(str(path)).log_level == "DEBUG"
