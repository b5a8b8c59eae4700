from hexmap.safe_parse import to_int, to_float, to_pair


def test_safe_parse_helpers():
    assert to_int("7") == 7
    assert to_int(" -4 ") == -4
    assert to_int(3.0) == 3
    assert to_int("bad", default=3) == 3
    assert to_int(True, default=5) == 5
    assert to_int(None, default=2) == 2
    assert to_float("1.5") == 1.5
    assert to_float(2) == 2.0
    assert to_float("nan", default=2.5) == 2.5
    assert to_float(float("inf"), default=0.5) == 0.5


def test_to_pair():
    assert to_pair([1, "2"]) == (1.0, 2.0)
    assert to_pair({"x": 3, "y": -1.5}) == (3.0, -1.5)
    assert to_pair("oops", default=(9.0, 9.0)) == (9.0, 9.0)
    assert to_pair([1, 2, 3]) == (0.0, 0.0)


def test_coercion_failures_are_logged(caplog):
    to_int("twelve", default=1)
    to_float("x1", default=0.0)
    assert "to_int" in caplog.text
    assert "to_float" in caplog.text


def test_to_int_rejects_non_decimal_digits(caplog):
    assert to_int("²", default=10) == 10
    assert to_int("-³", default=4) == 4
    assert "to_int" in caplog.text
