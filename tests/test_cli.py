import argparse
from pathlib import Path

import pytest

from gridpath.__main__ import main, parse_coord


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in [
        "GRIDPATH_CONFIG",
        "GRIDPATH_WIDTH",
        "GRIDPATH_HEIGHT",
        "GRIDPATH_LOG_LEVEL",
    ]:
        monkeypatch.delenv(name, raising=False)


def test_parse_coord() -> None:
    assert parse_coord("3,4") == (3, 4)
    with pytest.raises(argparse.ArgumentTypeError):
        parse_coord("3")
    with pytest.raises(argparse.ArgumentTypeError):
        parse_coord("a,b")


def test_cli_prints_result(capsys: pytest.CaptureFixture[str]) -> None:
    main(
        [
            "--width",
            "5",
            "--height",
            "5",
            "--lattice-spacing",
            "0",
            "--goal",
            "4,4",
            "--no-render",
        ]
    )

    output = capsys.readouterr().out
    assert "FOUND: 9 cells, cost 8.00" in output


def test_cli_renders_grid_from_map(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "maze.txt"
    path.write_text("S.#.\n..#.\n...G\n", encoding="utf-8")

    main(["--map", str(path)])

    output = capsys.readouterr().out
    assert "Grid 4x3" in output
    assert "FOUND: 6 cells, cost 5.00" in output


def test_cli_reports_unreachable(capsys: pytest.CaptureFixture[str]) -> None:
    main(
        [
            "--width",
            "3",
            "--height",
            "3",
            "--lattice-spacing",
            "0",
            "--obstacle",
            "1,2",
            "--obstacle",
            "2,1",
            "--no-render",
        ]
    )

    assert "UNREACHABLE" in capsys.readouterr().out


def test_cli_exits_on_obstacle_goal() -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--width", "9", "--height", "9", "--goal", "4,4"])

    assert "obstacle" in str(exc_info.value)


def test_cli_exits_on_invalid_dimensions() -> None:
    with pytest.raises(SystemExit):
        main(["--width", "0", "--height", "3"])


def test_cli_highlights_neighbours(capsys: pytest.CaptureFixture[str]) -> None:
    main(
        [
            "--width",
            "4",
            "--height",
            "4",
            "--lattice-spacing",
            "0",
            "--highlight",
            "1,1",
        ]
    )

    output = capsys.readouterr().out
    assert "Grid 4x4" in output
    assert "FOUND" in output


def test_cli_exits_on_out_of_bounds_highlight() -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--width", "4", "--height", "4", "--highlight", "9,9"])

    assert "outside" in str(exc_info.value)


def test_cli_exits_on_malformed_json_map(tmp_path: Path) -> None:
    path = tmp_path / "grid.json"
    path.write_text('{"width": 3, "height": 3, "obstacles": 5}', encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        main(["--map", str(path), "--no-render"])

    assert "'obstacles' must be a list" in str(exc_info.value)
