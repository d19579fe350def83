"""
Tests for Catalog Module.
=========================

Tests for:
- Loader: Catalog file loading and validation
- Catalog: Lookup, university pages, popular and recommended picks
- Mentors: Directory loading and category filtering
"""

import json

import pytest


# ─────────────────────────────────────────────────────────────────────────────
# Loader Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestLoadPrograms:
    """Tests for loading the catalog file."""

    def test_load_from_file(self, catalog_file):
        """Test loading camelCase records."""
        from gradcompass.catalog import load_programs

        programs = load_programs(catalog_file)

        assert len(programs) == 7
        assert programs[0].program_name == "MS in Computer Science"
        assert programs[0].degree_type == "MS"
        assert programs[0].total_annual_cost == 58000 + 10000 + 5000 + 1000

    def test_missing_file(self, temp_dir):
        """Test that a missing file raises CatalogError."""
        from gradcompass.catalog import CatalogError, load_programs

        with pytest.raises(CatalogError, match="not found"):
            load_programs(temp_dir / "missing.json")

    def test_invalid_json(self, temp_dir):
        """Test that malformed JSON raises CatalogError."""
        from gradcompass.catalog import CatalogError, load_programs

        path = temp_dir / "broken.json"
        path.write_text("[{", encoding="utf-8")

        with pytest.raises(CatalogError, match="not valid JSON"):
            load_programs(path)

    def test_empty_facet_rejected(self, temp_dir, program_factory):
        """Test that a record with an empty facet value is invalid."""
        from gradcompass.catalog import CatalogError, load_programs

        path = temp_dir / "programs.json"
        record = program_factory("p1", "Uni", "", "Finance", "UK", "London", 1000)
        path.write_text(json.dumps([record]), encoding="utf-8")

        with pytest.raises(CatalogError, match="Invalid program record"):
            load_programs(path)

    def test_catalog_error_is_value_error(self):
        """Test the exception hierarchy."""
        from gradcompass.catalog import CatalogError

        assert issubclass(CatalogError, ValueError)

    def test_bundled_catalog_loads(self, project_root):
        """Test that the shipped data files are valid."""
        from gradcompass.catalog import Catalog, MentorDirectory

        catalog = Catalog.from_file(project_root / "data" / "programs.json")
        mentors = MentorDirectory.from_file(project_root / "data" / "mentors.json")

        assert len(catalog) > 0
        assert len(mentors) > 0
        assert "Germany" in catalog.facet_index.countries


# ─────────────────────────────────────────────────────────────────────────────
# Catalog Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestCatalog:
    """Tests for the Catalog class."""

    def test_duplicate_ids_rejected(self, sample_programs):
        """Test that program ids must be unique."""
        from gradcompass.catalog import Catalog, CatalogError

        with pytest.raises(CatalogError, match="Duplicate program id: p1"):
            Catalog(sample_programs + [sample_programs[0]])

    def test_get(self, sample_catalog):
        """Test lookup by id."""
        assert sample_catalog.get("p3").university == "TU Munich"
        assert sample_catalog.get("nope") is None

    def test_by_university(self, sample_catalog):
        """Test the programs of one university in catalog order."""
        programs = sample_catalog.by_university("Stanford")

        assert [p.id for p in programs] == ["p1", "p2"]
        assert sample_catalog.by_university("Unknown") == []

    def test_universities(self, sample_catalog):
        """Test distinct university names."""
        universities = sample_catalog.universities()

        assert universities[0] == "Stanford"
        assert len(universities) == 6

    def test_facet_index_cached(self, sample_catalog):
        """Test that the facet index is built once."""
        assert sample_catalog.facet_index is sample_catalog.facet_index

    def test_popular_is_reproducible_with_seed(self, sample_catalog):
        """Test the shuffled popular selection."""
        first = sample_catalog.popular(count=4, seed=7)
        second = sample_catalog.popular(count=4, seed=7)

        assert [p.id for p in first] == [p.id for p in second]
        assert len(first) == 4
        assert len({p.id for p in first}) == 4

    def test_popular_caps_at_catalog_size(self, sample_catalog):
        """Test asking for more programs than exist."""
        assert len(sample_catalog.popular(count=50)) == len(sample_catalog)

    def test_recommended(self, sample_catalog):
        """Test that recommendations are the first programs."""
        assert [p.id for p in sample_catalog.recommended()] == ["p1", "p2", "p3"]

    def test_iteration_order(self, sample_catalog, sample_programs):
        """Test that iteration keeps catalog order."""
        assert list(sample_catalog) == sample_programs


# ─────────────────────────────────────────────────────────────────────────────
# Mentor Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestMentorDirectory:
    """Tests for the mentor directory."""

    def test_load(self, mentors_file):
        """Test loading mentors from a file."""
        from gradcompass.catalog import load_mentors

        mentors = load_mentors(mentors_file)

        assert [m.id for m in mentors] == ["m1", "m2", "m3", "m4", "m5"]

    def test_categories(self):
        """Test the category tabs."""
        from gradcompass.catalog import MentorDirectory

        assert MentorDirectory.categories == ("All", "Study Abroad", "Essay", "Resume", "Test Prep")

    def test_filter_all(self, sample_mentors):
        """Test that All lists every mentor."""
        from gradcompass.catalog import MentorDirectory

        directory = MentorDirectory(sample_mentors)

        assert len(directory.filter("All")) == 5
        assert len(directory.filter()) == 5

    def test_filter_resume_includes_study_abroad(self, sample_mentors):
        """Test that the Resume tab also shows Study Abroad mentors."""
        from gradcompass.catalog import MentorDirectory

        directory = MentorDirectory(sample_mentors)

        assert [m.id for m in directory.filter("Resume")] == ["m1", "m3"]

    def test_filter_single_category(self, sample_mentors):
        """Test a plain category filter."""
        from gradcompass.catalog import MentorDirectory

        directory = MentorDirectory(sample_mentors)

        assert [m.id for m in directory.filter("Essay")] == ["m2"]
        assert [m.id for m in directory.filter("Study Abroad")] == ["m1"]

    def test_get(self, sample_mentors):
        """Test lookup by id."""
        from gradcompass.catalog import MentorDirectory

        directory = MentorDirectory(sample_mentors)

        assert directory.get("m4").name == "Kenji"
        assert directory.get("m9") is None

    def test_average_rating(self, sample_mentors):
        """Test the mean review rating."""
        assert sample_mentors[0].average_rating == 4.5
        assert sample_mentors[1].average_rating is None
