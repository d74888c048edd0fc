import json
from pathlib import Path

import pytest

from costar import cli
from costar.commands.common import normalize_command
from costar.commands.parser import build_parser


def _build(sample_dump: Path, out_dir: Path, repo_path: Path, *extra: str) -> int:
    return cli.main(
        [
            "build",
            "--input",
            str(sample_dump),
            "--output-dir",
            str(out_dir),
            "--repo-path",
            str(repo_path),
            *extra,
        ]
    )


@pytest.fixture
def repo_path(tmp_path: Path) -> Path:
    repo = tmp_path / "repo"
    repo.mkdir()
    return repo


def test_cli_parser_supports_command_aliases() -> None:
    parser = build_parser()
    parsed = parser.parse_args(["bacon", "--from", "Meg Ryan"])
    assert normalize_command(parsed.command) == "path"
    assert parsed.target is None

    parsed_build = parser.parse_args(["generate", "--input", "dump.tsv"])
    assert normalize_command(parsed_build.command) == "build"

    parsed_serve = parser.parse_args(["serve", "--graph", "out.bin"])
    assert parsed_serve.command == "serve"


def test_build_command_writes_graph_and_movies(sample_dump: Path, tmp_path: Path, repo_path: Path) -> None:
    out_dir = tmp_path / "out"

    assert _build(sample_dump, out_dir, repo_path) == 0

    assert (out_dir / "out.bin").exists()
    assert (out_dir / "movies.bin").exists()


def test_path_command_prints_json(sample_dump: Path, tmp_path: Path, repo_path: Path, capsys) -> None:
    out_dir = tmp_path / "out"
    assert _build(sample_dump, out_dir, repo_path) == 0
    capsys.readouterr()

    exit_code = cli.main(
        [
            "path",
            "--graph",
            str(out_dir / "out.bin"),
            "--movies",
            str(out_dir / "movies.bin"),
            "--from",
            "Meg Ryan",
            "--json",
            "--repo-path",
            str(repo_path),
        ]
    )

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["found"] is True
    assert payload["target"] == "Kevin Bacon"
    assert [hop["movie_title"] for hop in payload["hops"]] == ["Sleepless in Seattle", "Apollo 13"]
    assert payload["total_weight"] == 233 + 235


def test_path_command_text_output(sample_dump: Path, tmp_path: Path, repo_path: Path, capsys) -> None:
    out_dir = tmp_path / "out"
    assert _build(sample_dump, out_dir, repo_path) == 0
    capsys.readouterr()

    exit_code = cli.main(
        ["path", "--graph", str(out_dir / "out.bin"), "--from", "Tom Hanks", "--to", "Meg Ryan", "--repo-path", str(repo_path)]
    )

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "Tom Hanks -> Meg Ryan: 1 hops" in out
    assert "movie #2" in out


def test_path_command_respects_max_hops(sample_dump: Path, tmp_path: Path, repo_path: Path) -> None:
    out_dir = tmp_path / "out"
    assert _build(sample_dump, out_dir, repo_path) == 0
    (repo_path / ".costar.yaml").write_text("query:\n  max_path_hops: 1\n")

    exit_code = cli.main(["path", "--graph", str(out_dir / "out.bin"), "--from", "Meg Ryan", "--repo-path", str(repo_path)])

    assert exit_code == 1


def test_unknown_actor_returns_error_code(sample_dump: Path, tmp_path: Path, repo_path: Path) -> None:
    out_dir = tmp_path / "out"
    assert _build(sample_dump, out_dir, repo_path) == 0

    exit_code = cli.main(["path", "--graph", str(out_dir / "out.bin"), "--from", "Nobody", "--repo-path", str(repo_path)])

    assert exit_code == 2


def test_build_with_missing_prune_root_fails(sample_dump: Path, tmp_path: Path, repo_path: Path) -> None:
    exit_code = _build(sample_dump, tmp_path / "out", repo_path, "--prune-root", "Nobody Here")
    assert exit_code == 2
    assert not (tmp_path / "out" / "out.bin").exists()


def test_stats_command_reports_counts(sample_dump: Path, tmp_path: Path, repo_path: Path, capsys) -> None:
    out_dir = tmp_path / "out"
    assert _build(sample_dump, out_dir, repo_path, "--reference-year", "2000") == 0
    capsys.readouterr()

    exit_code = cli.main(
        ["stats", "--graph", str(out_dir / "out.bin"), "--movies", str(out_dir / "movies.bin"), "--json", "--repo-path", str(repo_path)]
    )

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == {"nodes": 3, "edges": 2, "movies": 3, "max_degree": 2, "isolated_nodes": 0}


def test_missing_graph_file_returns_error_code(tmp_path: Path, repo_path: Path) -> None:
    exit_code = cli.main(["stats", "--graph", str(tmp_path / "missing.bin"), "--repo-path", str(repo_path)])
    assert exit_code == 2
