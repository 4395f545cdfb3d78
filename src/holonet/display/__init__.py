"""Console display of fetched SWAPI data."""

from holonet.display.formatter import (
    format_character,
    format_films,
    format_planets,
    format_starships,
    format_stats,
    format_vehicle,
    select_large_planets,
    show,
    sort_films_by_release,
)

__all__ = [
    "format_character",
    "format_starships",
    "format_planets",
    "format_films",
    "format_vehicle",
    "format_stats",
    "select_large_planets",
    "sort_films_by_release",
    "show",
]
