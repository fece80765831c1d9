# minibench

A collection of small, self-contained programs and the library code behind
them. Each one is a module of the `minibench` package, and most have a
command of their own. Only the standard library is used.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | What it does | Command |
| --- | --- | --- |
| `minibench.taxon` | Taxonomic ranks, from domain to species | `minibench-taxons` |
| `minibench.taxon_api` | A minimal WSGI API with logging and JSON middleware | `minibench-taxon-api` |
| `minibench.vehicle` | Vehicles configured through option functions | `minibench-vehicle` |
| `minibench.storage` | A storage configured through option functions | `minibench-storage` |
| `minibench.singleton` | A thread-safe, lazily created shared server object | `minibench-singleton` |
| `minibench.inmet` | INMET weather alerts: parsing, counting and filtering | — |
| `minibench.geoloc` | IP-based geolocation lookup | — |
| `minibench.alerts_cli` | Reports the weather alerts that apply to where you are | `minibench-alerts` |
| `minibench.eyedrops` | Builds a dated medication schedule from a prescription | `minibench-eyedrops` |
| `minibench.hashtags` | Ranks the most viewed videos of a hashtag page | `minibench-hashtags` |
| `minibench.bardoze` | A small restaurant menu website | `minibench-bardoze` |
| `minibench.partyinvites` | A party RSVP website | `minibench-partyinvites` |

## Commands

```
minibench-taxons                      # print every taxonomic rank name, in order
minibench-taxon-api [-listenaddr localhost:8080] [-lang en]
                                      # serve the API until Ctrl-C
minibench-vehicle                     # build and print a sample customised vehicle
minibench-storage                     # create and print an in-memory storage
minibench-singleton                   # ask for the shared server from ten threads,
                                      # then wait for a line of input
minibench-alerts [--alerts-url URL] [--geoloc-url URL]
                                      # log today's and future alerts for your region
minibench-eyedrops [PRESCRIPTION]     # print the schedule (default: sample_prescription.json)
minibench-hashtags [-ht ai] [-t 10]   # print the top videos for a hashtag
minibench-bardoze [--menu dishes.json] [--port 3000]
                                      # serve the restaurant menu site
minibench-partyinvites [--port 3000]  # serve the party invitation site
```

## Using the library

### Taxonomic ranks

```python
from minibench.taxon import TaxonRank, taxon_name

for rank in TaxonRank:
    print(taxon_name(rank))
```

`taxon_name` accepts a `TaxonRank` or its integer value; an unknown rank
raises `ValueError`.

### Taxon API

`make_app()` returns a WSGI app that answers `/api/v1` with the text
`api/v1` and every other path with 404. `logger(app)` wraps an app so each
request is logged with its method, path and duration, and
`json_content(app)` gives responses an `application/json` content type when
they set none. `serve(listen_address, app_lang)` runs the app on
`host:port` in a background thread until interrupted and returns the
server, still open. `Config`, `Lang` and `lang_by_code` hold the settings.

### Vehicles built from options

```python
from minibench.vehicle import VehicleType, accessory, color, model, new_vehicle, vehicle_type

car = new_vehicle(
    vehicle_type(VehicleType.SUV),
    model("XLE"),
    color("gray"),
    accessory("Cargo Cover", 179.0, "Retractable cargo cover."),
)
print(car)
```

A vehicle starts as a black XLE car with no accessories. Each option checks
its input when applied: unknown colours, models or vehicle types, a price
that is not positive, or an empty accessory description raise a
`VehicleError` subclass (`ColorNotAvailableError`, `ModelNotAvailableError`,
`VehicleTypeNotFoundError`, `InvalidAccessoryPriceError`,
`NoAccessoryDescriptionError`). `new_vehicle` logs such an error as a
warning and carries on with the remaining options. `color_from_name`
accepts names and short aliases such as `"gray"`, `"white"` or `"red"`,
case-insensitively.

### Storage built from options

```python
from minibench.storage import new_storage, with_memory_repository

store = new_storage(with_memory_repository())
store.memory_driver.add(...)
print(store.memory_driver.get_all())
```

A storage always has a `MemoryRepository`. `MongoRepository` and
`MySQLRepository` have the same `add`/`get_all` interface but store nothing.

### Shared server

`new_server()` returns the same `Server` object every time, creating it
under a lock on the first call; it prints whether it created the server or
found it already created.

### Weather alerts

```python
from minibench.inmet import parse_active_alerts

active = parse_active_alerts(text)   # JSON text or the decoded object
today, future = active.get_all()
print(active.count(), today.count(), future.count())
for alert in today.by_region("Paraíba"):
    print(alert.description, alert.severity)
```

`by_region` keeps the alerts whose `states` text contains the region name.
`fetch_data()` in `minibench.inmet` downloads the live alerts and raises
`InmetError` when they cannot be fetched, read or parsed;
`minibench.geoloc.fetch_data()` looks up the location of this machine and
raises `GeoLocError` likewise. `minibench.alerts_cli.report(active,
location)` returns the report lines that `minibench-alerts` logs.

### Medication schedules

```python
from minibench.eyedrops import format_schedule, parse_prescription, schedule

prescription = parse_prescription(text)   # text: the prescription JSON
print(format_schedule(schedule(prescription)), end="")
```

A prescription maps medicine names to objects with `interval`,
`interval_size`, `interval_mod`, `interval_change`, `quantity`, `duration`,
`duration_unit`, `type` and `first_medication` (an RFC 3339 time with an
offset). The interval counts hours when `interval_size` is `"hour"` and the
duration counts days when `duration_unit` is `"day"`; other units are taken
as nanoseconds. Once the days since the first dose reach `interval_mod`,
the interval grows by `interval_change` and the threshold doubles.
Doses are listed in time order, numbered from `000`, with the medicine name
in upper case, the date, a 12-hour time, the quantity and the kind of
medication.

### Hashtag rankings

`rank_videos(body)` takes the raw bytes of a hashtag page, picks out each
video's title, channel, view count and age from its accessibility label
(which is read in Portuguese, `"... visualizações há N anos"`), and returns
`VideoInfo` records, most viewed first. `format_ranking(videos, hashtag,
top_n)` renders the report and `fetch_page(hashtag)` downloads the page.

### Web sites

`minibench.bardoze.load_menu(path)` reads a JSON file of the form
`{"Dishes": [{"code": ..., "name": ..., "description": ..., "price": ...,
"special": ...}]}` into a `Menu`; `make_app(menu)` serves a welcome page at
`/` and the dish list at `/dishes`.

`minibench.partyinvites.PartyApp` is a WSGI app with a home page, an RSVP
form at `/form` and the list of replies at `/list`. `validate_rsvp` returns
the messages for the fields left empty:

```python
from minibench.partyinvites import Rsvp, validate_rsvp

validate_rsvp(Rsvp(name="Ana", email="ana@example.com"))
# ['enter your phone number']
```

## What it does not do

- The web pages are built-in HTML; there are no template files to edit.
- The party site keeps its replies in memory only; they are lost when the
  server stops.
- The taxon API has a single route and does not serve taxon data.
- The Mongo and MySQL repositories do not connect to any database.