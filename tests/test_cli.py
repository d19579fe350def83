"""
Tests for CLI Module.
=====================

Runs the Typer commands against the sample catalog and mentor files.
"""

import pytest
from typer.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def cli_app():
    from gradcompass.cli.main import app

    return app


class TestSuggestCommand:
    """Tests for `gradcompass suggest`."""

    def test_lists_suggestions(self, runner, cli_app, catalog_file):
        """Test single-facet suggestions."""
        result = runner.invoke(cli_app, ["suggest", "ma", "--catalog", str(catalog_file)])

        assert result.exit_code == 0
        assert "Marketing" in result.output
        assert "Mannheim" in result.output

    def test_no_suggestions(self, runner, cli_app, catalog_file):
        """Test a query nothing matches."""
        result = runner.invoke(cli_app, ["suggest", "zzz", "--catalog", str(catalog_file)])

        assert result.exit_code == 0
        assert "No suggestions" in result.output

    def test_missing_catalog(self, runner, cli_app, temp_dir):
        """Test that a missing catalog file exits with an error."""
        result = runner.invoke(cli_app, ["suggest", "ma", "--catalog", str(temp_dir / "none.json")])

        assert result.exit_code == 1
        assert "not found" in result.output


class TestSearchCommand:
    """Tests for `gradcompass search`."""

    def test_facet_options(self, runner, cli_app, catalog_file):
        """Test filtering by degree and country."""
        result = runner.invoke(
            cli_app, ["search", "-d", "MBA", "-c", "Germany", "--catalog", str(catalog_file)]
        )

        assert result.exit_code == 0
        assert "p4" in result.output
        assert "p2" not in result.output

    def test_tuition_ceiling_without_matches(self, runner, cli_app, catalog_file):
        """Test that the tuition ceiling applies to every program."""
        result = runner.invoke(
            cli_app, ["search", "-c", "India", "-t", "20000", "--catalog", str(catalog_file)]
        )

        assert result.exit_code == 0
        assert "No programs match these filters." in result.output

    def test_query_resolves_facets(self, runner, cli_app, catalog_file):
        """Test free text becoming facet filters."""
        result = runner.invoke(
            cli_app, ["search", "-q", "MSc in Data Science", "--catalog", str(catalog_file)]
        )

        assert result.exit_code == 0
        assert "p3" in result.output
        assert "p7" in result.output
        assert "p6" not in result.output

    def test_query_opens_university(self, runner, cli_app, catalog_file):
        """Test that a university name shows the university."""
        result = runner.invoke(cli_app, ["search", "-q", "Stanford", "--catalog", str(catalog_file)])

        assert result.exit_code == 0
        assert "/university/Stanford" in result.output
        assert "p1" in result.output
        assert "p2" in result.output


class TestCatalogCommands:
    """Tests for facets, program and university commands."""

    def test_facets_country(self, runner, cli_app, catalog_file):
        """Test listing one facet."""
        result = runner.invoke(cli_app, ["facets", "country", "--catalog", str(catalog_file)])

        assert result.exit_code == 0
        for country in ("Germany", "India", "UK", "USA"):
            assert country in result.output

    def test_unknown_facet(self, runner, cli_app, catalog_file):
        """Test an unknown facet name."""
        result = runner.invoke(cli_app, ["facets", "continent", "--catalog", str(catalog_file)])

        assert result.exit_code == 1
        assert "Unknown facet" in result.output

    def test_program(self, runner, cli_app, catalog_file):
        """Test showing one program."""
        result = runner.invoke(cli_app, ["program", "p3", "--catalog", str(catalog_file)])

        assert result.exit_code == 0
        assert "TU Munich" in result.output
        assert "$22,000" in result.output

    def test_missing_program(self, runner, cli_app, catalog_file):
        """Test an unknown program id."""
        result = runner.invoke(cli_app, ["program", "p99", "--catalog", str(catalog_file)])

        assert result.exit_code == 1
        assert "Program not found" in result.output

    def test_missing_university(self, runner, cli_app, catalog_file):
        """Test an unknown university."""
        result = runner.invoke(cli_app, ["university", "Oxford", "--catalog", str(catalog_file)])

        assert result.exit_code == 1
        assert "University not found" in result.output


class TestMentorsCommand:
    """Tests for `gradcompass mentors`."""

    def test_resume_category(self, runner, cli_app, mentors_file):
        """Test that Resume also lists Study Abroad mentors."""
        result = runner.invoke(
            cli_app, ["mentors", "-c", "Resume", "--mentors", str(mentors_file)]
        )

        assert result.exit_code == 0
        assert "Priya" in result.output
        assert "Aisha" in result.output
        assert "Daniel" not in result.output

    def test_unknown_category(self, runner, cli_app, mentors_file):
        """Test a category that has no tab."""
        result = runner.invoke(
            cli_app, ["mentors", "-c", "Finance", "--mentors", str(mentors_file)]
        )

        assert result.exit_code == 1
        assert "Unknown category" in result.output


class TestAdviseCommand:
    """Tests for `gradcompass advise`."""

    @pytest.fixture(autouse=True)
    def no_api_key(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "")
        monkeypatch.setenv("API_KEY", "")

    def test_roi_without_key(self, runner, cli_app, catalog_file):
        """Test the fallback text without an API key."""
        result = runner.invoke(
            cli_app, ["advise", "roi", "-p", "p1", "--catalog", str(catalog_file)]
        )

        assert result.exit_code == 0
        assert "ROI Analysis unavailable." in result.output

    def test_outline_requires_program(self, runner, cli_app):
        """Test that outline needs --program."""
        result = runner.invoke(cli_app, ["advise", "outline"])

        assert result.exit_code == 1
        assert "--program is required" in result.output

    def test_unknown_kind(self, runner, cli_app):
        """Test an unknown advice kind."""
        result = runner.invoke(cli_app, ["advise", "horoscope"])

        assert result.exit_code == 1
        assert "Unknown advice kind" in result.output


class TestInfoCommand:
    """Tests for `gradcompass info`."""

    def test_info(self, runner, cli_app):
        """Test that info shows version and settings."""
        from gradcompass import __version__

        result = runner.invoke(cli_app, ["info"])

        assert result.exit_code == 0
        assert __version__ in result.output
        assert "Guest shortlist limit" in result.output


class TestJourneyCommands:
    """Tests for `gradcompass journey`."""

    @pytest.fixture
    def local_files(self, temp_dir) -> list[str]:
        return [
            "--accounts", str(temp_dir / "accounts.json"),
            "--profiles", str(temp_dir / "profiles.json"),
        ]

    @pytest.fixture
    def registered(self, runner, cli_app, local_files) -> list[str]:
        """Register Asha and return the credential options."""
        credentials = ["-e", "asha@example.com", "--password", "secret"]
        result = runner.invoke(
            cli_app, ["journey", "register", "-n", "Asha", *credentials, *local_files]
        )
        assert result.exit_code == 0
        assert "Account created" in result.output
        return [*credentials, *local_files]

    def test_shortlist_round_trip(self, runner, cli_app, registered, catalog_file):
        """Test adding, listing and removing a program."""
        catalog = ["--catalog", str(catalog_file)]

        result = runner.invoke(cli_app, ["journey", "add", "p3", *registered, *catalog])
        assert result.exit_code == 0
        assert "Shortlisted" in result.output

        result = runner.invoke(cli_app, ["journey", "add", "p3", *registered, *catalog])
        assert result.exit_code == 0
        assert "already on your shortlist" in result.output

        result = runner.invoke(cli_app, ["journey", "shortlist", *registered])
        assert result.exit_code == 0
        assert "p3" in result.output

        result = runner.invoke(cli_app, ["journey", "remove", "p3", *registered])
        assert result.exit_code == 0

        result = runner.invoke(cli_app, ["journey", "shortlist", *registered])
        assert "Your shortlist is empty." in result.output

        result = runner.invoke(cli_app, ["journey", "remove", "p3", *registered])
        assert result.exit_code == 1

    def test_apply(self, runner, cli_app, registered, catalog_file):
        """Test moving a shortlisted program into the application set."""
        runner.invoke(
            cli_app, ["journey", "add", "p3", *registered, "--catalog", str(catalog_file)]
        )

        result = runner.invoke(cli_app, ["journey", "apply", "p3", "-t", "Safe", *registered])

        assert result.exit_code == 0
        assert "Status: Planning" in result.output
        assert "Round: Round 1" in result.output
        assert "Deadline: 2025-01-01" in result.output
        assert "Tier: Safe" in result.output

    def test_apply_requires_shortlist(self, runner, cli_app, registered):
        """Test applying to a program that is not shortlisted."""
        result = runner.invoke(cli_app, ["journey", "apply", "p1", *registered])

        assert result.exit_code == 1
        assert "not on your shortlist" in result.output

    def test_apply_unknown_tier(self, runner, cli_app, registered):
        """Test an invalid tier."""
        result = runner.invoke(cli_app, ["journey", "apply", "p1", "-t", "Maybe", *registered])

        assert result.exit_code == 1
        assert "Unknown tier" in result.output

    def test_wrong_password(self, runner, cli_app, registered, local_files):
        """Test that bad credentials exit with an error."""
        result = runner.invoke(
            cli_app,
            ["journey", "shortlist", "-e", "asha@example.com", "--password", "wrong", *local_files],
        )

        assert result.exit_code == 1
        assert "Invalid login credentials" in result.output

    def test_duplicate_register(self, runner, cli_app, registered, local_files):
        """Test registering the same email twice."""
        result = runner.invoke(
            cli_app,
            ["journey", "register", "-n", "Asha", "-e", "asha@example.com",
             "--password", "secret", *local_files],
        )

        assert result.exit_code == 1
        assert "already registered" in result.output
