"""Tests for the CLI entry point."""

import json
from pathlib import Path
from textwrap import dedent

import pytest

from main import build_request, load_settings, main, parse_args
from roster.core.config import Settings
from roster.core.schemas import SortDirection, SortField


@pytest.fixture()
def roster_file(tmp_path: Path) -> Path:
    path = tmp_path / "roster.yaml"
    rows = []
    for i in range(1, 11):
        department = "CSE" if i <= 4 else "ECE"
        rows.append(
            f'- {{roll_number: "{department}2025-{i:03d}", name: "Student {i:02d}", '
            f"department: {department}, year: {1 + i % 4}, score: {i / 2}}}"
        )
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    return path


@pytest.fixture()
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "settings.yaml"
    path.write_text(dedent("""\
        page_size: 3
        default_sort_field: score
        default_sort_direction: desc
    """))
    return path


class TestParseArgs:
    def test_defaults_to_query(self) -> None:
        args = parse_args([])
        assert args.command == "query"
        assert args.search == ""
        assert args.department == "all"
        assert args.year == "all"
        assert args.page == 1

    def test_flags_without_subcommand(self) -> None:
        args = parse_args(["--search", "ravi", "--department", "CSE", "--page", "2"])
        assert args.command == "query"
        assert args.search == "ravi"
        assert args.department == "CSE"
        assert args.page == 2

    def test_stats_subcommand(self) -> None:
        args = parse_args(["stats", "--data", "x.yaml"])
        assert args.command == "stats"
        assert args.data == "x.yaml"

    def test_unknown_department_rejected(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["--department", "BIO"])


class TestBuildRequest:
    def test_settings_supply_sort_defaults(self) -> None:
        settings = Settings(
            page_size=5,
            default_sort_field=SortField.SCORE,
            default_sort_direction=SortDirection.DESC,
        )
        request = build_request(parse_args(["--year", "2"]), settings)
        assert request.sort_field == SortField.SCORE
        assert request.sort_direction == SortDirection.DESC
        assert request.page_size == 5
        assert request.year == 2
        assert request.department is None

    def test_flags_override_settings(self) -> None:
        request = build_request(parse_args(["--sort", "name", "--direction", "desc"]), Settings())
        assert request.sort_field == SortField.NAME
        assert request.sort_direction == SortDirection.DESC


class TestLoadSettings:
    def test_missing_explicit_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_settings(str(tmp_path / "missing.yaml"))


class TestMain:
    def test_query_department(
        self, roster_file: Path, config_file: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        main(["--config", str(config_file), "--data", str(roster_file), "--department", "CSE"])
        out = capsys.readouterr().out
        assert "Students (4 of 10) - Page 1 of 2" in out
        assert "Showing 1 to 3 of 4 students" in out
        assert "CSE2025-004" in out

    def test_query_json_export(
        self, roster_file: Path, config_file: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        main([
            "query", "--config", str(config_file), "--data", str(roster_file),
            "--page", "99", "--export", "json",
        ])
        data = json.loads(capsys.readouterr().out)
        assert data["total_matches"] == 10
        assert data["total_pages"] == 4
        assert data["current_page"] == 4
        # score desc: the lowest score is last
        assert [item["roll_number"] for item in data["items"]] == ["CSE2025-001"]

    def test_query_no_matches(
        self, roster_file: Path, config_file: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        main(["--config", str(config_file), "--data", str(roster_file), "--search", "zzzzzz"])
        assert "No students match your search criteria." in capsys.readouterr().out

    def test_stats(
        self, roster_file: Path, config_file: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        main(["stats", "--config", str(config_file), "--data", str(roster_file)])
        out = capsys.readouterr().out
        assert "Total Students: 10" in out
        assert "Departments:    2" in out
        assert "Average Score:  2.75" in out

    def test_missing_data_exits(
        self, tmp_path: Path, config_file: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["--config", str(config_file), "--data", str(tmp_path / "missing.yaml")])
        assert exc.value.code == 1
        assert "Roster file not found" in capsys.readouterr().err

    def test_settings_file_as_data_exits(
        self, config_file: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["--config", str(config_file), "--data", str(config_file)])
        assert exc.value.code == 1
        assert "list of students" in capsys.readouterr().err

    def test_bad_config_exits(self, tmp_path: Path, roster_file: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("page_size: 0\n")
        with pytest.raises(SystemExit) as exc:
            main(["--config", str(path), "--data", str(roster_file)])
        assert exc.value.code == 1
