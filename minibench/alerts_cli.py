"""Report the weather alerts that apply to the current location."""

from __future__ import annotations

import argparse
import logging

from minibench import geoloc, inmet
from minibench.geoloc import GeoLocationInfo
from minibench.inmet import ActiveAlerts

log = logging.getLogger(__name__)


def report(active: ActiveAlerts, location: GeoLocationInfo) -> list[str]:
    """Return the report lines for the alerts and the location."""
    today, future = active.get_all()
    today_here = today.by_region(location.region)
    future_here = future.by_region(location.region)
    lines = [
        f"Active weather alerts: {active.count()}, today ({today.count()}) future ({future.count()})",
        f"Your current location: {location.city}, {location.region} - {location.region_code}",
        f"Active alerts in your region: today ({today_here.count()}), future ({future_here.count()})",
    ]
    for label, alerts in (("Today", today_here), ("Future", future_here)):
        lines += [f"{label} alert #{n}: {a.description} ({a.severity})"
                  for n, a in enumerate(alerts, 1)]
    return lines


def main(argv: list[str] | None = None) -> int:
    """Fetch alerts and location, then log the report."""
    parser = argparse.ArgumentParser(description="Weather alerts for your region")
    parser.add_argument("--alerts-url", default=inmet.ACTIVE_ALERTS_ENDPOINT)
    parser.add_argument("--geoloc-url", default=geoloc.API_ENDPOINT)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    try:
        active = inmet.fetch_data(args.alerts_url)
        location = geoloc.fetch_data(args.geoloc_url)
    except (inmet.InmetError, geoloc.GeoLocError) as exc:
        log.error("%s", exc)
        return 1
    for line in report(active, location):
        log.info("%s", line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())