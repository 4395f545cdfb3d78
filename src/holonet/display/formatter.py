"""Console formatting for SWAPI documents.

Every ``format_*`` function is pure: it takes a parsed SWAPI document and
returns the lines to display. ``show`` writes lines to the display logger.

Planet filtering and film ordering work on DataFrames built from the list
page ``results``; SWAPI sends numbers as strings and uses "unknown" for
missing values, so numeric columns are coerced (unknown -> NaN).
"""

import logging
from typing import Any, Iterable

import pandas as pd

logger = logging.getLogger("holonet.display")

STARSHIP_LIMIT = 3
MIN_POPULATION = 1_000_000_000
MIN_DIAMETER = 10_000


def _count(value: Any) -> int:
    """Length of a SWAPI link list; 0 for missing or NaN cells."""
    return len(value) if isinstance(value, list) else 0


def show(lines: Iterable[str]) -> None:
    """Write formatted lines to the display logger."""
    for line in lines:
        logger.info(line)


def format_character(data: dict[str, Any]) -> list[str]:
    """Format a ``people/{id}`` document."""
    lines = [
        f"Character: {data.get('name')}",
        f"Height: {data.get('height')}",
        f"Mass: {data.get('mass')}",
        f"Birthday: {data.get('birth_year')}",
    ]
    films = _count(data.get("films"))
    if films > 0:
        lines.append(f"Appears in {films} films")
    return lines


def format_starships(data: dict[str, Any], limit: int = STARSHIP_LIMIT) -> list[str]:
    """Format a starships list page, showing at most ``limit`` entries.

    Args:
        data: ``starships/?page=N`` document with ``count`` and ``results``
        limit: Maximum starships to show (default: 3)

    Returns:
        Total count line followed by one block per starship
    """
    lines = [f"Total Starships: {data.get('count')}"]

    for i, starship in enumerate(data.get("results", [])[:limit], start=1):
        cost = starship.get("cost_in_credits")
        lines.extend([
            f"Starship {i}:",
            f"Name: {starship.get('name')}",
            f"Model: {starship.get('model')}",
            f"Manufacturer: {starship.get('manufacturer')}",
            f"Cost: {f'{cost} credits' if cost != 'unknown' else 'unknown'}",
            f"Speed: {starship.get('max_atmosphering_speed')}",
            f"Hyperdrive Rating: {starship.get('hyperdrive_rating')}",
        ])
        pilots = _count(starship.get("pilots"))
        if pilots > 0:
            lines.append(f"Pilots: {pilots}")

    return lines


def select_large_planets(results: list[dict[str, Any]]) -> pd.DataFrame:
    """Select planets that are both heavily populated and large.

    Keeps planets with population > 1,000,000,000 AND diameter > 10,000
    (both strict). "unknown" or unparseable values never pass the filter.

    Args:
        results: Planet documents from a planets list page

    Returns:
        DataFrame of matching planets, in their original order

    Example:
        >>> planets = select_large_planets([
        ...     {"name": "Naboo", "population": "4500000000", "diameter": "12120"},
        ...     {"name": "Hoth", "population": "unknown", "diameter": "7200"},
        ... ])
        >>> list(planets["name"])
        ['Naboo']
    """
    planets = pd.DataFrame(results)
    if planets.empty:
        return planets

    required_cols = ["population", "diameter"]
    for col in required_cols:
        if col not in planets.columns:
            raise ValueError(f"Missing required column: {col}")

    population = pd.to_numeric(planets["population"], errors="coerce")
    diameter = pd.to_numeric(planets["diameter"], errors="coerce")

    # NaN compares False, so unknown values drop out here
    mask = (population > MIN_POPULATION) & (diameter > MIN_DIAMETER)
    return planets[mask]


def format_planets(data: dict[str, Any]) -> list[str]:
    """Format the large populated planets from a planets list page."""
    lines = ["Large populated planets:"]

    large = select_large_planets(data.get("results", []))
    for planet in large.to_dict("records"):
        lines.append(
            f"{planet.get('name')} - Pop: {planet.get('population')}"
            f" - Diameter: {planet.get('diameter')}"
            f" - Climate: {planet.get('climate')}"
        )
        films = _count(planet.get("films"))
        if films > 0:
            lines.append(f"  Appears in {films} films")

    return lines


def sort_films_by_release(results: list[dict[str, Any]]) -> pd.DataFrame:
    """Order films by release date, oldest first.

    The sort is stable: films sharing a release date keep their original
    relative order. Films with an unparseable date go last.

    Args:
        results: Film documents from the films list

    Returns:
        DataFrame of films in release order, re-indexed from 0
    """
    films = pd.DataFrame(results)
    if films.empty:
        return films

    if "release_date" not in films.columns:
        raise ValueError("Missing required column: release_date")

    released = pd.to_datetime(films["release_date"], errors="coerce")
    order = released.sort_values(kind="stable", na_position="last").index
    return films.loc[order].reset_index(drop=True)


def format_films(data: dict[str, Any]) -> list[str]:
    """Format the films list in chronological order."""
    lines = ["Star Wars Films in chronological order:"]

    ordered = sort_films_by_release(data.get("results", []))
    for index, film in enumerate(ordered.to_dict("records"), start=1):
        lines.extend([
            f"{index}. {film.get('title')} ({film.get('release_date')})",
            f"   Director: {film.get('director')}",
            f"   Producer: {film.get('producer')}",
            f"   Characters: {_count(film.get('characters'))}",
            f"   Planets: {_count(film.get('planets'))}",
        ])

    return lines


def format_vehicle(data: dict[str, Any]) -> list[str]:
    """Format a ``vehicles/{id}`` document."""
    return [
        "Featured Vehicle:",
        f"Name: {data.get('name')}",
        f"Model: {data.get('model')}",
        f"Manufacturer: {data.get('manufacturer')}",
        f"Cost: {data.get('cost_in_credits')} credits",
        f"Length: {data.get('length')}",
        f"Crew Required: {data.get('crew')}",
        f"Passengers: {data.get('passengers')}",
    ]


def format_stats(runs: int, cache_size: int, total_bytes: int, errors: int) -> list[str]:
    """Format the end-of-run summary."""
    return [
        "Stats:",
        f"API Calls: {runs}",
        f"Cache Size: {cache_size}",
        f"Total Data Size: {total_bytes} bytes",
        f"Error Count: {errors}",
    ]
