"""Small self-contained programs: taxonomy ranks, option-built vehicles and storages, weather alerts, medication schedules, hashtag rankings and tiny web apps."""

__version__ = "0.1.0"