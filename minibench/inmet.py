"""Weather alerts published by INMET."""

from __future__ import annotations

import copy
import json
import logging
from dataclasses import dataclass, field, fields
from typing import Any, Iterator, Mapping
from urllib.error import HTTPError
from urllib.request import urlopen

ACTIVE_ALERTS_ENDPOINT = "https://apiprevmet3.inmet.gov.br/avisos/ativos"

FETCH_ERROR = "unable to get data from INMET"
READ_ERROR = "unable to read INMET data"
PARSE_ERROR = "unable to parse INMET data"

log = logging.getLogger(__name__)


class InmetError(Exception):
    """Alerts could not be fetched, read or parsed."""


def _json(key: str, kind: type) -> Any:
    meta = {"json": key, "kind": kind}
    if kind is list:
        return field(default_factory=list, metadata=meta)
    return field(default=None if kind is object else kind(), metadata=meta)


@dataclass
class Alert:
    """A weather alert and the area it covers."""

    severe_condition_id: int = _json("id_condicao_severa", int)
    start_date: str = _json("data_inicio", str)
    start_hour: str = _json("hora_inicio", str)
    end_date: str = _json("data_fim", str)
    end_hour: str = _json("hora_fim", str)
    polygon: str = _json("poligono", str)
    cities: str = _json("municipios", str)
    microregions: str = _json("microrregioes", str)
    mesoregions: str = _json("mesorregioes", str)
    states: str = _json("estados", str)
    regions: str = _json("regioes", str)
    geocodes: str = _json("geocodes", str)
    id: int = _json("id", int)
    alert_id: int = _json("id_aviso", int)
    sequence_id: int = _json("id_sequencia", int)
    icon_id: int = _json("id_icone", int)
    user_id: int = _json("id_usuario", int)
    code: str = _json("codigo", str)
    reference: Any = _json("referencia", object)
    modified: bool = _json("alterado", bool)
    closed: bool = _json("encerrado", bool)
    created_at: str = _json("created_at", str)
    updated_at: str = _json("updated_at", str)
    start: str = _json("inicio", str)
    end: str = _json("fim", str)
    icon: str = _json("icone", str)
    description: str = _json("descricao", str)
    alert_color: str = _json("aviso_cor", str)
    severity_id: int = _json("id_severidade", int)
    severity: str = _json("severidade", str)
    risks: list[str] = _json("riscos", list)
    instructions: list[str] = _json("instrucoes", list)


@dataclass
class WeatherAlerts:
    """An ordered list of alerts."""

    alerts: list[Alert] = field(default_factory=list)

    def __iter__(self) -> Iterator[Alert]:
        return iter(self.alerts)

    def __len__(self) -> int:
        return len(self.alerts)

    def __getitem__(self, index: int) -> Alert:
        return self.alerts[index]

    def count(self) -> int:
        """Return the number of alerts."""
        return len(self.alerts)

    def by_region(self, region: str) -> WeatherAlerts:
        """Return the alerts whose states mention the region."""
        return WeatherAlerts([a for a in self.alerts if region in a.states])

    def by_severity(self, severity: str) -> WeatherAlerts:
        """Return the alerts whose states field equals the given text, ignoring case."""
        wanted = severity.lower()
        return WeatherAlerts([a for a in self.alerts if a.states.lower() == wanted])


@dataclass
class ActiveAlerts:
    """Today's and future alerts."""

    today: WeatherAlerts = field(default_factory=WeatherAlerts)
    future: WeatherAlerts = field(default_factory=WeatherAlerts)

    def get_all(self) -> tuple[WeatherAlerts, WeatherAlerts]:
        """Return copies of today's and of the future alerts."""
        return self.today_alerts(), self.future_alerts()

    def today_alerts(self) -> WeatherAlerts:
        """Return a copy of today's alerts."""
        return WeatherAlerts([copy.copy(a) for a in self.today])

    def future_alerts(self) -> WeatherAlerts:
        """Return a copy of the future alerts."""
        return WeatherAlerts([copy.copy(a) for a in self.future])

    def count(self) -> int:
        """Return the number of alerts, today's and future together."""
        return self.today.count() + self.future.count()


def _convert(value: Any, kind: type) -> Any:
    if kind is object:
        return value
    if value is None:
        return kind()
    if kind is list:
        if isinstance(value, list) and all(isinstance(v, str) for v in value):
            return list(value)
    elif kind is bool:
        if isinstance(value, bool):
            return value
    elif kind is int:
        if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
            return value
    elif isinstance(value, kind):
        return value
    raise InmetError(PARSE_ERROR)


def parse_alert(data: Mapping[str, Any]) -> Alert:
    """Build an alert from its decoded JSON object."""
    if not isinstance(data, Mapping):
        raise InmetError(PARSE_ERROR)
    values = {
        f.name: _convert(data[f.metadata["json"]], f.metadata["kind"])
        for f in fields(Alert)
        if f.metadata["json"] in data
    }
    return Alert(**values)


def _alert_list(items: Any) -> WeatherAlerts:
    if items is None:
        return WeatherAlerts()
    if not isinstance(items, list):
        raise InmetError(PARSE_ERROR)
    return WeatherAlerts([parse_alert(item) for item in items])


def parse_active_alerts(data: str | bytes | Mapping[str, Any]) -> ActiveAlerts:
    """Build the active alerts from JSON text or its decoded object."""
    if isinstance(data, (str, bytes, bytearray)):
        try:
            data = json.loads(data)
        except ValueError:
            raise InmetError(PARSE_ERROR) from None
    if not isinstance(data, Mapping):
        raise InmetError(PARSE_ERROR)
    return ActiveAlerts(
        today=_alert_list(data.get("hoje")),
        future=_alert_list(data.get("futuro")),
    )


def fetch_data(url: str = ACTIVE_ALERTS_ENDPOINT) -> ActiveAlerts:
    """Download and parse the active alerts."""
    log.info("Fetching data from INMET..")
    try:
        response = urlopen(url, timeout=30)
    except HTTPError as exc:
        response = exc
    except (OSError, ValueError):
        raise InmetError(FETCH_ERROR) from None
    with response:
        try:
            body = response.read()
        except OSError:
            raise InmetError(READ_ERROR) from None
    return parse_active_alerts(body)