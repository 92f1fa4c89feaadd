"""End-to-end tests for the click CLI."""

from click.testing import CliRunner

from model_demos.infrastructure import bootstrap
from model_demos.infrastructure.cli.main import cli


class TestDemoCommands:

    def test_finance(self):
        result = CliRunner().invoke(cli, ["finance"])
        assert result.exit_code == 0
        assert "Insufficient funds" in result.output

    def test_health(self):
        result = CliRunner().invoke(cli, ["health"])
        assert result.exit_code == 0
        assert "Prescriptions for Ama Mensah:" in result.output

    def test_inventory(self):
        result = CliRunner().invoke(cli, ["inventory"])
        assert result.exit_code == 0
        assert "Electronic item with ID 1 already exists" in result.output
        assert "Grocery item with ID 99 not found" in result.output
        assert "Quantity cannot be negative" in result.output


class TestStudentsCommand:

    def test_writes_report(self, tmp_path):
        input_path = tmp_path / "students.txt"
        input_path.write_text("101, Alice Smith, 84\n104, David Brown, 52\n", encoding="utf-8")
        output_path = tmp_path / "report.txt"

        result = CliRunner().invoke(
            cli, ["students", "--input", str(input_path), "--output", str(output_path)]
        )

        assert result.exit_code == 0
        assert output_path.read_text(encoding="utf-8") == (
            "Alice Smith (ID: 101): Score = 84, Grade = A\n"
            "David Brown (ID: 104): Score = 52, Grade = D\n"
        )

    def test_missing_input_reported_not_raised(self, tmp_path):
        result = CliRunner().invoke(
            cli,
            ["students", "--input", str(tmp_path / "absent.txt"),
             "--output", str(tmp_path / "report.txt")],
        )
        assert result.exit_code == 0
        assert "Error:" in result.output

    def test_seed_sample(self, tmp_path):
        input_path = tmp_path / "students.txt"
        output_path = tmp_path / "report.txt"

        result = CliRunner().invoke(
            cli,
            ["students", "--input", str(input_path), "--output", str(output_path),
             "--seed-sample"],
        )

        assert result.exit_code == 0
        assert input_path.exists()
        assert "Report written for 5 student(s)" in result.output


class TestAllCommand:

    def test_runs_every_demo_in_order(self, tmp_path, monkeypatch):
        monkeypatch.setattr(bootstrap, "STUDENTS_FILE", tmp_path / "students.txt")
        monkeypatch.setattr(bootstrap, "REPORT_FILE", tmp_path / "report.txt")

        result = CliRunner().invoke(cli, ["all"])

        assert result.exit_code == 0
        banners = [
            "--- FinanceApp Start ---",
            "--- FinanceApp End ---",
            "--- HealthSystemApp Start ---",
            "--- HealthSystemApp End ---",
            "--- WarehouseManager Start ---",
            "--- WarehouseManager End ---",
            "--- StudentReport Start ---",
            "--- StudentReport End ---",
        ]
        positions = [result.output.index(banner) for banner in banners]
        assert positions == sorted(positions)

    def test_seeds_and_reports_into_configured_paths(self, tmp_path, monkeypatch):
        monkeypatch.setattr(bootstrap, "STUDENTS_FILE", tmp_path / "students.txt")
        monkeypatch.setattr(bootstrap, "REPORT_FILE", tmp_path / "report.txt")

        result = CliRunner().invoke(cli, ["all"])

        assert result.exit_code == 0
        assert (tmp_path / "students.txt").exists()
        report = (tmp_path / "report.txt").read_text(encoding="utf-8").splitlines()
        assert report[0] == "Alice Smith (ID: 101): Score = 84, Grade = A"
        assert len(report) == 5


class TestStudentsCommandBadEncoding:

    def test_invalid_utf8_reported(self, tmp_path):
        input_path = tmp_path / "students.txt"
        input_path.write_bytes(b"101, Al\xffice, 84\n")

        result = CliRunner().invoke(
            cli,
            ["students", "--input", str(input_path),
             "--output", str(tmp_path / "report.txt")],
        )

        assert result.exit_code == 0
        assert "not valid UTF-8" in result.output
