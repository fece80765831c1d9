"""Build a medication timetable from a prescription."""

from __future__ import annotations

import argparse
import json
import math
from dataclasses import dataclass, fields
from datetime import datetime, timedelta
from pathlib import Path
from typing import Iterator, Mapping


@dataclass
class Medication:
    """How and for how long a medicine is taken."""

    interval: int = 0
    interval_size: str = ""
    interval_mod: int = 0
    interval_change: int = 0
    quantity: int = 0
    duration: int = 0
    duration_unit: str = ""
    type: str = ""
    first_medication: str = ""


@dataclass(frozen=True)
class ScheduledMedicine:
    """One dose at a point in time."""

    name: str
    date_time: datetime
    type: str
    quantity: int


def _medication(name: str, data: object) -> Medication:
    if not isinstance(data, Mapping):
        raise ValueError(f"{name}: medication must be an object")
    values = {}
    for f in fields(Medication):
        value = data.get(f.name)
        if value is None:
            continue
        if type(value) is not type(f.default):
            raise ValueError(f"{name}: {f.name} must be of type {type(f.default).__name__}")
        values[f.name] = value
    return Medication(**values)


def parse_prescription(text: str | bytes) -> dict[str, Medication]:
    """Parse a JSON prescription mapping medicine names to medications."""
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError("prescription must be a JSON object")
    return {name: _medication(name, spec) for name, spec in data.items()}


def _span(amount: int, unit_is_large: bool, large: timedelta) -> timedelta:
    return amount * large if unit_is_large else timedelta(microseconds=amount / 1000)


def _doses(name: str, spec: Medication) -> Iterator[ScheduledMedicine]:
    text = spec.first_medication
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    start = when = datetime.fromisoformat(text)
    if start.tzinfo is None:
        raise ValueError(f"missing time zone offset: {text!r}")
    end = start + _span(spec.duration, spec.duration_unit == "day", timedelta(days=1))
    interval = spec.interval
    interval_mod: float = spec.interval_mod or math.inf
    while when < end:
        yield ScheduledMedicine(name, when, spec.type, spec.quantity)
        if when > start and (when - start) / timedelta(days=1) >= interval_mod:
            interval_mod += interval_mod
            interval += spec.interval_change
        step = _span(interval, spec.interval_size == "hour", timedelta(hours=1))
        if step <= timedelta(0):
            raise ValueError(f"{name}: interval must be positive")
        when += step


def schedule(prescription: Mapping[str, Medication]) -> list[ScheduledMedicine]:
    """Return every dose of every medication, in time order."""
    doses = [dose for name, spec in prescription.items() for dose in _doses(name, spec)]
    return sorted(doses, key=lambda dose: dose.date_time)


def format_schedule(scheduled: list[ScheduledMedicine]) -> str:
    """Render the doses as numbered lines."""
    lines = []
    for n, dose in enumerate(scheduled):
        t = dose.date_time
        kitchen = f"{t.hour % 12 or 12}:{t.minute:02d}{'AM' if t.hour < 12 else 'PM'}"
        lines.append(f"{n:03d} {dose.name.upper()} {t:%Y-%m-%d} {kitchen} {dose.quantity} {dose.type}\n")
    return "".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Print the timetable for a prescription file."""
    parser = argparse.ArgumentParser(description="Medication timetable")
    parser.add_argument("prescription", nargs="?", default="sample_prescription.json")
    args = parser.parse_args(argv)
    prescription = parse_prescription(Path(args.prescription).read_text(encoding="utf-8"))
    print(format_schedule(schedule(prescription)), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())