"""Tests for console formatting of SWAPI documents."""

import logging

import pytest

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


def make_starship(n: int, **fields) -> dict:
    starship = {
        "name": f"Ship {n}",
        "model": f"Model {n}",
        "manufacturer": "Kuat Drive Yards",
        "cost_in_credits": "1000",
        "max_atmosphering_speed": "1000",
        "hyperdrive_rating": "1.0",
        "pilots": [],
    }
    starship.update(fields)
    return starship


def make_planet(name: str, population: str, diameter: str, **fields) -> dict:
    planet = {
        "name": name,
        "population": population,
        "diameter": diameter,
        "climate": "temperate",
        "films": [],
    }
    planet.update(fields)
    return planet


def make_film(title: str, release_date: str) -> dict:
    return {
        "title": title,
        "release_date": release_date,
        "director": "George Lucas",
        "producer": "Rick McCallum",
        "characters": ["c1", "c2"],
        "planets": ["p1"],
    }


class TestCharacter:

    def test_basic_fields(self) -> None:
        lines = format_character({
            "name": "Luke Skywalker",
            "height": "172",
            "mass": "77",
            "birth_year": "19BBY",
            "films": ["f1", "f2", "f3", "f4"],
        })

        assert lines == [
            "Character: Luke Skywalker",
            "Height: 172",
            "Mass: 77",
            "Birthday: 19BBY",
            "Appears in 4 films",
        ]

    def test_no_films_line_when_empty(self) -> None:
        lines = format_character({"name": "Nobody", "films": []})
        assert not any("Appears in" in line for line in lines)


class TestStarships:

    def test_caps_at_three(self) -> None:
        data = {"count": 36, "results": [make_starship(i) for i in range(1, 6)]}

        lines = format_starships(data)

        assert lines[0] == "Total Starships: 36"
        assert "Starship 3:" in lines
        assert "Starship 4:" not in lines
        assert "Name: Ship 4" not in lines

    def test_fewer_than_limit(self) -> None:
        data = {"count": 1, "results": [make_starship(1)]}

        lines = format_starships(data)

        assert "Starship 1:" in lines
        assert "Starship 2:" not in lines

    def test_cost_formatting(self) -> None:
        data = {
            "count": 2,
            "results": [
                make_starship(1, cost_in_credits="3500000"),
                make_starship(2, cost_in_credits="unknown"),
            ],
        }

        lines = format_starships(data)

        assert "Cost: 3500000 credits" in lines
        assert "Cost: unknown" in lines

    def test_pilot_count(self) -> None:
        data = {"count": 1, "results": [make_starship(1, pilots=["a", "b"])]}
        assert "Pilots: 2" in format_starships(data)


class TestLargePlanets:

    def test_strict_population_threshold(self) -> None:
        """Population of exactly one billion is excluded."""
        planets = select_large_planets([
            make_planet("Exact", "1000000000", "20000"),
            make_planet("Above", "1000000001", "20000"),
        ])
        assert list(planets["name"]) == ["Above"]

    def test_strict_diameter_threshold(self) -> None:
        planets = select_large_planets([
            make_planet("Exact", "2000000000", "10000"),
            make_planet("Above", "2000000000", "10001"),
        ])
        assert list(planets["name"]) == ["Above"]

    def test_unknown_population_excluded(self) -> None:
        planets = select_large_planets([
            make_planet("Mystery", "unknown", "50000"),
            make_planet("Coruscant", "1000000000000", "12240"),
        ])
        assert list(planets["name"]) == ["Coruscant"]

    def test_unknown_diameter_excluded(self) -> None:
        planets = select_large_planets([make_planet("Bespin", "6000000", "unknown")])
        assert planets.empty

    def test_empty_results(self) -> None:
        assert select_large_planets([]).empty

    def test_missing_column_raises(self) -> None:
        with pytest.raises(ValueError, match="Missing required column: diameter"):
            select_large_planets([{"name": "Tatooine", "population": "200000"}])

    def test_format_planets(self) -> None:
        data = {
            "results": [
                make_planet("Tatooine", "200000", "10465"),
                make_planet("Naboo", "4500000000", "12120", films=["f1", "f2"]),
            ]
        }

        lines = format_planets(data)

        assert lines == [
            "Large populated planets:",
            "Naboo - Pop: 4500000000 - Diameter: 12120 - Climate: temperate",
            "  Appears in 2 films",
        ]


class TestFilms:

    def test_sorted_by_release_date(self) -> None:
        films = sort_films_by_release([
            make_film("Return of the Jedi", "1983-05-25"),
            make_film("A New Hope", "1977-05-25"),
            make_film("The Empire Strikes Back", "1980-05-17"),
        ])
        assert list(films["title"]) == [
            "A New Hope",
            "The Empire Strikes Back",
            "Return of the Jedi",
        ]

    def test_ties_keep_original_order(self) -> None:
        films = sort_films_by_release([
            make_film("Later", "2005-05-19"),
            make_film("Tie B", "1999-05-19"),
            make_film("Tie A", "1999-05-19"),
        ])
        assert list(films["title"]) == ["Tie B", "Tie A", "Later"]

    def test_unparseable_dates_last(self) -> None:
        films = sort_films_by_release([
            make_film("Undated", "someday"),
            make_film("Dated", "1977-05-25"),
        ])
        assert list(films["title"]) == ["Dated", "Undated"]

    def test_missing_release_date_raises(self) -> None:
        with pytest.raises(ValueError, match="release_date"):
            sort_films_by_release([{"title": "No date"}])

    def test_format_films(self) -> None:
        data = {
            "results": [
                make_film("The Phantom Menace", "1999-05-19"),
                make_film("A New Hope", "1977-05-25"),
            ]
        }

        lines = format_films(data)

        assert lines[0] == "Star Wars Films in chronological order:"
        assert lines[1] == "1. A New Hope (1977-05-25)"
        assert lines[2] == "   Director: George Lucas"
        assert lines[4] == "   Characters: 2"
        assert lines[5] == "   Planets: 1"
        assert lines[6] == "2. The Phantom Menace (1999-05-19)"


class TestVehicleAndStats:

    def test_format_vehicle(self) -> None:
        lines = format_vehicle({
            "name": "Sand Crawler",
            "model": "Digger Crawler",
            "manufacturer": "Corellia Mining Corporation",
            "cost_in_credits": "150000",
            "length": "36.8 ",
            "crew": "46",
            "passengers": "30",
        })

        assert lines[0] == "Featured Vehicle:"
        assert "Cost: 150000 credits" in lines
        assert "Crew Required: 46" in lines
        assert "Passengers: 30" in lines

    def test_format_stats(self) -> None:
        assert format_stats(runs=2, cache_size=5, total_bytes=1234, errors=1) == [
            "Stats:",
            "API Calls: 2",
            "Cache Size: 5",
            "Total Data Size: 1234 bytes",
            "Error Count: 1",
        ]


def test_show_logs_each_line(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="holonet.display"):
        show(["first", "second"])

    assert [r.getMessage() for r in caplog.records] == ["first", "second"]
