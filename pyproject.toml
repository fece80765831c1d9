[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minibench"
version = "0.1.0"
description = "A bench of small programs: taxonomy ranks, option-built vehicles and storages, weather alerts, medication schedules, hashtag rankings and tiny web apps."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "taxonomy",
    "functional-options",
    "singleton",
    "weather-alerts",
    "medication-schedule",
    "wsgi",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minibench-taxons = "minibench.taxon:main"
minibench-taxon-api = "minibench.taxon_api:main"
minibench-vehicle = "minibench.vehicle:main"
minibench-storage = "minibench.storage:main"
minibench-singleton = "minibench.singleton:main"
minibench-alerts = "minibench.alerts_cli:main"
minibench-eyedrops = "minibench.eyedrops:main"
minibench-hashtags = "minibench.hashtags:main"
minibench-bardoze = "minibench.bardoze:main"
minibench-partyinvites = "minibench.partyinvites:main"

[tool.hatch.build.targets.wheel]
packages = ["minibench"]

[tool.pytest.ini_options]
addopts = "-ra"
