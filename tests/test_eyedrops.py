import json
from datetime import timedelta

import pytest

from minibench.eyedrops import (
    Medication,
    ScheduledMedicine,
    format_schedule,
    main,
    parse_prescription,
    schedule,
)

FIRST = "2024-01-15T08:00:00Z"


def _spec(**overrides) -> Medication:
    values = dict(
        interval=6,
        interval_size="hour",
        quantity=2,
        duration=1,
        duration_unit="day",
        type="drops",
        first_medication=FIRST,
    )
    values.update(overrides)
    return Medication(**values)


def _gaps(doses):
    return [b.date_time - a.date_time for a, b in zip(doses, doses[1:])]


def test_parse_prescription_reads_fields():
    text = json.dumps(
        {"eye": {"interval": 6, "interval_size": "hour", "quantity": 2,
                 "duration": 1, "duration_unit": "day", "type": "drops",
                 "first_medication": FIRST, "extra": True}}
    )
    assert parse_prescription(text) == {"eye": _spec()}


@pytest.mark.parametrize(
    "text", ["not json", "[]", '{"eye": 3}', '{"eye": {"interval": "6"}}', '{"eye": {"quantity": true}}']
)
def test_parse_prescription_errors(text):
    with pytest.raises(ValueError):
        parse_prescription(text)


def test_doses_are_evenly_spaced_within_duration():
    doses = schedule({"eye": _spec()})
    start = doses[0].date_time
    assert start.isoformat() == "2024-01-15T08:00:00+00:00"
    assert all(gap == timedelta(hours=6) for gap in _gaps(doses))
    assert doses[-1].date_time < start + timedelta(days=1)
    assert doses[-1].date_time + timedelta(hours=6) >= start + timedelta(days=1)
    assert all(d.name == "eye" and d.quantity == 2 and d.type == "drops" for d in doses)


def test_interval_grows_after_interval_mod_days():
    doses = schedule({"eye": _spec(interval=4, interval_mod=1, interval_change=2, duration=3)})
    gaps = _gaps(doses)
    assert gaps[0] == timedelta(hours=4)
    assert gaps == sorted(gaps)
    assert gaps[-1] > timedelta(hours=4)


def test_schedule_merges_medications_in_time_order():
    doses = schedule(
        {"a": _spec(interval=8), "b": _spec(interval=5, first_medication="2024-01-15T09:00:00Z")}
    )
    times = [d.date_time for d in doses]
    assert times == sorted(times)
    assert {d.name for d in doses} == {"a", "b"}


def test_zero_interval_is_rejected():
    with pytest.raises(ValueError):
        schedule({"eye": _spec(interval=0)})


def test_bad_first_medication_is_rejected():
    with pytest.raises(ValueError):
        schedule({"eye": _spec(first_medication="yesterday")})


def test_format_schedule_lines():
    doses = schedule({"eye": _spec()})
    lines = format_schedule(doses).splitlines()
    assert len(lines) == len(doses)
    assert lines[0] == "000 EYE 2024-01-15 8:00AM 2 drops"
    assert lines[1].startswith("001 EYE ")


def test_format_schedule_afternoon():
    doses = schedule({"eye": _spec(first_medication="2024-01-15T13:05:00-03:00", duration=0)})
    assert doses == []
    dose = ScheduledMedicine("eye", schedule({"eye": _spec(first_medication="2024-01-15T13:05:00-03:00")})[0].date_time, "drops", 1)
    assert format_schedule([dose]) == "000 EYE 2024-01-15 1:05PM 1 drops\n"


def test_main_prints_schedule(tmp_path, capsys):
    path = tmp_path / "prescription.json"
    text = json.dumps({"eye": {"interval": 12, "interval_size": "hour", "quantity": 1,
                               "duration": 2, "duration_unit": "day", "type": "drops",
                               "first_medication": FIRST}})
    path.write_text(text, encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out == format_schedule(schedule(parse_prescription(text)))