from pathlib import Path

import pytest


def dump_row(movie_id: str, title: str, year: str, cast: str) -> str:
    parts = [movie_id, "tt000", title, year, "", "", "", "", "", "", cast]
    return "\t".join(parts) + "\n"


# Co-stars only get linked when a movie row recurs, so linked movies appear twice.
SAMPLE_ROWS = [
    dump_row("1", "Apollo 13", "1995", "Kevin Bacon, Tom Hanks"),
    dump_row("2", "Sleepless in Seattle", "1993", "Tom Hanks, Meg Ryan"),
    dump_row("3", "Lone Film", "2001", "Lone Star, Other Person"),
    dump_row("1", "Apollo 13", "1995", "Kevin Bacon, Tom Hanks"),
    dump_row("bad", "Broken", "1990", "Kevin Bacon, Tom Hanks"),
    dump_row("2", "Sleepless in Seattle", "1993", "Tom Hanks, Meg Ryan"),
    dump_row("3", "Lone Film", "2001", "Lone Star, Other Person"),
    dump_row("4", "In the Cut", "2003", "Kevin Bacon, Meg Ryan"),
    dump_row("5", "Mask", "1985", "Cher, Eric Stoltz"),
]


@pytest.fixture
def sample_lines() -> list[str]:
    return list(SAMPLE_ROWS)


@pytest.fixture
def sample_dump(tmp_path: Path) -> Path:
    path = tmp_path / "movies.tsv"
    path.write_text("".join(SAMPLE_ROWS))
    return path
