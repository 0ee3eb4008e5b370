import pytest

from looneygrep.config import Config, ConfigError


@pytest.fixture(autouse=True)
def _no_ignore_case_env(monkeypatch):
    monkeypatch.delenv("IGNORE_CASE", raising=False)


def test_query_and_file():
    config = Config.build(["lg", "foo", "bar.txt"])
    assert config == Config(query="foo", file_path="bar.txt")


def test_missing_query():
    with pytest.raises(ConfigError, match="Didn't get a query string"):
        Config.build(["lg"])


def test_missing_file_and_url():
    with pytest.raises(ConfigError, match="Didn't get a file path or URL"):
        Config.build(["lg", "foo"])


def test_url_without_file():
    config = Config.build(["lg", "foo", "--url", "http://localhost/page"])
    assert config.url == "http://localhost/page"
    assert config.file_path == ""


def test_url_flag_without_value_is_an_error():
    with pytest.raises(ConfigError):
        Config.build(["lg", "foo", "--url"])


def test_all_without_file():
    config = Config.build(["lg", "foo", "--all"])
    assert config.search_all is True
    assert config.file_path == ""


def test_flags():
    config = Config.build(
        ["lg", "foo", "a.txt", "--replace", "--ignore-case", "--context", "3"]
    )
    assert config.replace is True
    assert config.ignore_case is True
    assert config.context == 3


@pytest.mark.parametrize("value", ["abc", "-1", "1.5", " 2"])
def test_invalid_context_is_zero(value):
    config = Config.build(["lg", "foo", "a.txt", "--context", value])
    assert config.context == 0


def test_context_without_value_is_zero():
    config = Config.build(["lg", "foo", "a.txt", "--context"])
    assert config.context == 0


def test_context_with_plus_sign():
    config = Config.build(["lg", "foo", "a.txt", "--context", "+4"])
    assert config.context == 4


def test_last_positional_wins():
    config = Config.build(["lg", "foo", "first.txt", "second.txt"])
    assert config.file_path == "second.txt"


def test_ignore_case_from_environment(monkeypatch):
    monkeypatch.setenv("IGNORE_CASE", "")
    config = Config.build(["lg", "foo", "a.txt"])
    assert config.ignore_case is True


def test_error_is_value_error():
    with pytest.raises(ValueError):
        Config.build([])