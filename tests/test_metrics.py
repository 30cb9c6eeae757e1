import pytest

from src.extraction.metrics import classify_macd, classify_rsi, extract_metrics, parse_number


def as_tuples(metrics):
    return {(m.label, m.type, m.value) for m in metrics}


def test_four_metrics_example():
    text = "RSI: 66.23 ... MACD: 7.89 ... Support: $252 ... Resistance: $260"
    metrics = extract_metrics(text)
    assert len(metrics) == 4
    assert as_tuples(metrics) == {
        ("RSI", "neutral", "66.23"),
        ("MACD", "bullish", "7.89"),
        ("Support", "neutral", "$252"),
        ("Resistance", "neutral", "$260"),
    }


@pytest.mark.parametrize("value,expected", [
    ("70", "neutral"),
    ("70.1", "bearish"),
    ("29.9", "bullish"),
    ("30", "neutral"),
    ("85", "bearish"),
    ("12", "bullish"),
])
def test_rsi_boundaries(value, expected):
    (metric,) = extract_metrics(f"RSI: {value}")
    assert metric.label == "RSI"
    assert metric.value == value
    assert metric.type == expected


@pytest.mark.parametrize("value,expected", [
    ("0", "bearish"),
    ("-1.25", "bearish"),
    ("0.5", "bullish"),
])
def test_macd_has_no_neutral_zone(value, expected):
    (metric,) = extract_metrics(f"MACD: {value}")
    assert metric.value == value
    assert metric.type == expected


def test_first_match_wins():
    metrics = extract_metrics("RSI: 25 early on, later RSI: 80")
    assert len(metrics) == 1
    assert metrics[0].value == "25"
    assert metrics[0].type == "bullish"


def test_price_levels_with_commas_and_without_dollar():
    metrics = {m.label: m for m in extract_metrics("Support: $1,234.50, then 1,100\nResistance: 1310")}
    assert metrics["Support"].value == "$1,234.50"
    assert metrics["Resistance"].value == "$1310"
    assert metrics["Support"].type == "neutral"


def test_case_insensitive_labels():
    (metric,) = extract_metrics("rsi: 45")
    assert metric.label == "RSI"


def test_missing_metrics_are_omitted():
    assert extract_metrics("") == []
    assert extract_metrics("RSI is elevated but no value given") == []


def test_unreadable_numbers():
    assert classify_rsi(parse_number(".")) == "neutral"
    assert classify_macd(parse_number("-")) == "bearish"
    assert parse_number("7.89.") == 7.89
