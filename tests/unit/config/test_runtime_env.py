import pytest

from portsniper.config import ConfigurationError, runtime
from portsniper.config.runtime_helpers import DotenvLoader


@pytest.fixture
def unloaded_defaults(monkeypatch):
    monkeypatch.setattr(runtime, "_DEFAULT_VALUES", None)


def test_load_default_values_prefers_first_source(monkeypatch, tmp_path, unloaded_defaults):
    first = tmp_path / "project.env"
    first.write_text("FIRST=from_project\nSHARED=project\n")
    second = tmp_path / "home.env"
    second.write_text("SHARED=home\nOTHER='quoted'\n")

    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", (first, second))

    defaults = runtime._load_default_values()
    assert defaults == {"FIRST": "from_project", "SHARED": "project", "OTHER": "quoted"}
    # Cached value is reused without re-reading files
    assert runtime._load_default_values() is defaults


def test_env_str_uses_defaults_and_handles_blanks(monkeypatch):
    monkeypatch.setattr(runtime, "_DEFAULT_VALUES", {"FALLBACK": " spaced "})
    monkeypatch.delenv("FALLBACK", raising=False)
    assert runtime.env_str("FALLBACK") == "spaced"

    monkeypatch.setenv("ALLOW_BLANK", "")
    assert runtime.env_str("ALLOW_BLANK", allow_blank=True) == ""

    monkeypatch.setenv("NO_STRIP", " padded ")
    assert runtime.env_str("NO_STRIP", strip=False) == " padded "

    monkeypatch.delenv("MISSING_REQUIRED", raising=False)
    with pytest.raises(ConfigurationError):
        runtime.env_str("MISSING_REQUIRED", required=True)


def test_env_float_validation(monkeypatch):
    monkeypatch.setenv("FLOAT_VALUE", "2.5")
    assert runtime.env_float("FLOAT_VALUE") == 2.5

    monkeypatch.setenv("FLOAT_INVALID", "five")
    with pytest.raises(ConfigurationError):
        runtime.env_float("FLOAT_INVALID")

    monkeypatch.delenv("FLOAT_DEFAULT", raising=False)
    assert runtime.env_float("FLOAT_DEFAULT", or_value=1.5, required=True) == 1.5


@pytest.mark.parametrize("raw, expected", [("1", True), ("Yes", True), ("on", True), ("0", False), ("off", False), ("N", False)])
def test_env_bool_values(monkeypatch, raw, expected):
    monkeypatch.setenv("BOOL_VALUE", raw)
    assert runtime.env_bool("BOOL_VALUE") is expected


def test_env_bool_rejects_unknown(monkeypatch):
    monkeypatch.setenv("BOOL_VALUE", "perhaps")
    with pytest.raises(ConfigurationError):
        runtime.env_bool("BOOL_VALUE")


def test_env_seconds_rejects_negative(monkeypatch):
    monkeypatch.setenv("WAIT_SECONDS", "-3")
    with pytest.raises(ConfigurationError):
        runtime.env_seconds("WAIT_SECONDS")

    monkeypatch.setenv("WAIT_SECONDS", "0")
    assert runtime.env_seconds("WAIT_SECONDS") == 0.0


def test_dotenv_loader_skips_comments_and_accepts_export(tmp_path):
    path = tmp_path / ".env"
    path.write_text("# comment\n\nexport PORTSNIPER_FORCE=true\nNOT_A_PAIR\nPORTSNIPER_LOG_FILE=\"/tmp/ps.log\"\n")

    assert DotenvLoader.load_from_file(path) == {
        "PORTSNIPER_FORCE": "true",
        "PORTSNIPER_LOG_FILE": "/tmp/ps.log",
    }


def test_dotenv_loader_missing_file(tmp_path):
    assert DotenvLoader.load_from_file(tmp_path / "absent.env") == {}


@pytest.mark.parametrize("raw", ["nan", "inf", "-inf", "Infinity"])
def test_env_seconds_rejects_non_finite(monkeypatch, raw):
    monkeypatch.setenv("WAIT_SECONDS", raw)
    with pytest.raises(ConfigurationError):
        runtime.env_seconds("WAIT_SECONDS")
