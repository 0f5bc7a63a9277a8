"""Tests for limits_loader module."""
import json
import logging

import pytest

from errors import ConfigError
from limits_loader import default_limits_path, load_limits, symbols_for_fetch
from models import StockLimit


def _write(tmp_path, content, name="limits.json"):
    path = tmp_path / name
    path.write_text(content if isinstance(content, str) else json.dumps(content), encoding="utf-8")
    return path


def test_load_limits_valid_file(tmp_path):
    path = _write(tmp_path, [{"Symbol": "AAA", "Min": 10, "Max": 20}, {"Symbol": "BBB", "Min": 1.5, "Max": 2.5}])
    limits = load_limits(str(path))
    assert limits == [StockLimit("AAA", 10.0, 20.0), StockLimit("BBB", 1.5, 2.5)]


def test_load_limits_keys_case_insensitive(tmp_path):
    path = _write(tmp_path, [{"symbol": "AAA", "MIN": "10", "max": 20}])
    assert load_limits(path) == [StockLimit("AAA", 10.0, 20.0)]


def test_load_limits_empty_array(tmp_path):
    path = _write(tmp_path, "[]")
    assert load_limits(path) == []


def test_load_limits_missing_file_raises(tmp_path):
    missing = tmp_path / "nope.json"
    with pytest.raises(ConfigError, match="not found") as exc_info:
        load_limits(str(missing))
    assert exc_info.value.path == str(missing)


def test_load_limits_malformed_json_raises(tmp_path):
    path = _write(tmp_path, "not json {")
    with pytest.raises(ConfigError, match="not valid JSON"):
        load_limits(path)


def test_load_limits_not_a_list_raises(tmp_path):
    path = _write(tmp_path, {"Symbol": "AAA", "Min": 1, "Max": 2})
    with pytest.raises(ConfigError, match="JSON array"):
        load_limits(path)


@pytest.mark.parametrize(
    "item, message",
    [
        ({"Min": 1, "Max": 2}, "missing field 'Symbol'"),
        ({"Symbol": "AAA", "Max": 2}, "missing field 'Min'"),
        ({"Symbol": "AAA", "Min": "ten", "Max": 2}, "must be a number"),
        ({"Symbol": "AAA", "Min": True, "Max": 2}, "must be a number"),
        ({"Symbol": "", "Min": 1, "Max": 2}, "non-empty string"),
        ("AAA", "must be an object"),
    ],
)
def test_load_limits_bad_element_raises(tmp_path, item, message):
    path = _write(tmp_path, [item])
    with pytest.raises(ConfigError, match=message):
        load_limits(path)


def test_load_limits_blank_path_uses_default(tmp_path, monkeypatch):
    monkeypatch.delenv("STOCK_LIMITS_FILE", raising=False)
    _write(tmp_path, [{"Symbol": "VTI", "Min": 1, "Max": 2}], name="Stocks.json")
    monkeypatch.setattr("limits_loader.PROGRAM_DIR", tmp_path)
    assert load_limits("   ") == [StockLimit("VTI", 1.0, 2.0)]
    assert load_limits(None) == [StockLimit("VTI", 1.0, 2.0)]


def test_load_limits_blank_path_uses_explicit_default(tmp_path):
    default = _write(tmp_path, [{"Symbol": "X", "Min": 0, "Max": 1}], name="other.json")
    assert load_limits("", default_path=default) == [StockLimit("X", 0.0, 1.0)]


def test_default_limits_path_env_override(monkeypatch, tmp_path):
    monkeypatch.setenv("STOCK_LIMITS_FILE", str(tmp_path / "env.json"))
    assert default_limits_path() == tmp_path / "env.json"


def test_default_limits_path_next_to_program(monkeypatch, tmp_path):
    monkeypatch.delenv("STOCK_LIMITS_FILE", raising=False)
    monkeypatch.setattr("limits_loader.PROGRAM_DIR", tmp_path)
    assert default_limits_path() == tmp_path / "Stocks.json"


def test_load_limits_keeps_duplicates_and_warns(tmp_path, caplog):
    caplog.set_level(logging.WARNING)
    path = _write(tmp_path, [{"Symbol": "AAA", "Min": 1, "Max": 2}, {"Symbol": "aaa", "Min": 3, "Max": 4}])
    limits = load_limits(path)
    assert len(limits) == 2
    assert "Duplicate limit" in caplog.text


def test_load_limits_keeps_inverted_range_and_warns(tmp_path, caplog):
    caplog.set_level(logging.WARNING)
    path = _write(tmp_path, [{"Symbol": "AAA", "Min": 20, "Max": 10}])
    assert load_limits(path) == [StockLimit("AAA", 20.0, 10.0)]
    assert "greater than Max" in caplog.text


def test_symbols_for_fetch_keeps_file_order():
    limits = [StockLimit("bbb", 1, 2), StockLimit("aaa", 1, 2)]
    assert symbols_for_fetch(limits) == ["bbb", "aaa"]


@pytest.mark.parametrize("raw", ['[{"Symbol": "A", "Min": NaN, "Max": 2}]', '[{"Symbol": "A", "Min": 1, "Max": Infinity}]', '[{"Symbol": "A", "Min": "nan", "Max": 2}]'])
def test_load_limits_non_finite_number_raises(tmp_path, raw):
    path = _write(tmp_path, raw)
    with pytest.raises(ConfigError, match="finite number"):
        load_limits(path)


def test_load_limits_directory_raises(tmp_path):
    with pytest.raises(ConfigError, match="Could not read"):
        load_limits(str(tmp_path))


def test_load_limits_non_utf8_raises(tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes('[{"Symbol": "éé", "Min": 1, "Max": 2}]'.encode("latin-1"))
    with pytest.raises(ConfigError, match="Could not read"):
        load_limits(path)
