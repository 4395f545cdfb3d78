"""HOLONET — Star Wars API demo client.

Fetches people, starships, planets, films and vehicles from SWAPI through a
process-lifetime cache, prints them to the console, and exposes the fetch
behind a small HTTP server.
"""

__version__ = "0.1.0"
