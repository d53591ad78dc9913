from datetime import datetime, timedelta, timezone

from formbuilder.utils import dumps_json, loads_json, new_ulid, now_iso, to_iso


def test_to_iso_is_fixed_width_utc():
    value = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone(timedelta(hours=2)))

    assert to_iso(value) == "2026-03-01T10:00:00.000000Z"


def test_now_iso_sorts_with_time():
    earlier = to_iso(datetime(2026, 1, 1, 9, 59, 59, 999999, tzinfo=timezone.utc))

    assert earlier < now_iso()


def test_new_ulid_is_unique_text():
    ids = {new_ulid() for _ in range(100)}

    assert len(ids) == 100
    assert all(isinstance(value, str) and len(value) == 26 for value in ids)


def test_json_helpers():
    value = {"a": [1, 2.5, None, True], "b": "ü"}

    assert loads_json(dumps_json(value)) == value
    assert loads_json(None) is None
    assert loads_json("") is None
