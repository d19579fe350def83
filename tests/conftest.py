"""
Pytest Configuration and Fixtures.
===================================

Shared fixtures for all test modules:
- Synthetic program catalogs and facet indexes
- Mentors and profiles
- In-memory profile store and fake auth client
- Temporary directories and data files
"""

import json
import tempfile
from pathlib import Path
from typing import Generator, Optional

import pytest

from gradcompass.journey.store import ProfileStore, ProfileStoreError


# ─────────────────────────────────────────────────────────────────────────────
# Path Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def config_path(project_root: Path) -> Path:
    """Get the config file path."""
    return project_root / "config" / "settings.yaml"


# ─────────────────────────────────────────────────────────────────────────────
# Sample Data Fixtures
# ─────────────────────────────────────────────────────────────────────────────


def make_program_data(
    id: str,
    university: str,
    degree_type: str,
    specialization: str,
    country: str,
    city: str,
    tuition: float,
    **extra,
) -> dict:
    """Program record in catalog (camelCase) form."""
    data = {
        "id": id,
        "university": university,
        "programName": f"{degree_type} in {specialization}",
        "degreeType": degree_type,
        "specialization": specialization,
        "country": country,
        "city": city,
        "qsRanking": 100,
        "tuition": tuition,
        "duration": "2 Years",
        "acceptanceRate": "20%",
        "tags": [],
        "description": f"{degree_type} program at {university}.",
        "fees": {"living": 10000, "accommodation": 5000, "misc": 1000},
    }
    data.update(extra)
    return data


@pytest.fixture
def program_factory():
    """Factory for catalog records in camelCase form."""
    return make_program_data


@pytest.fixture
def sample_program_data() -> list[dict]:
    """Sample catalog records for testing."""
    return [
        make_program_data("p1", "Stanford", "MS", "Computer Science", "USA", "Stanford", 58000,
                          deadline="2024-12-01"),
        make_program_data("p2", "Stanford", "MBA", "Finance", "USA", "Stanford", 82000),
        make_program_data("p3", "TU Munich", "MSc", "Data Science", "Germany", "Munich", 6000),
        make_program_data("p4", "Mannheim Business School", "MBA", "Finance", "Germany", "Mannheim", 45000),
        make_program_data("p5", "IIM Ahmedabad", "MBA", "Marketing", "India", "Ahmedabad", 30000),
        make_program_data("p6", "IISc", "MS", "Data Science", "India", "Bangalore", 25000),
        make_program_data("p7", "Imperial College", "MSc", "Data Science", "UK", "London", 51000),
    ]


@pytest.fixture
def sample_programs(sample_program_data: list[dict]):
    """Sample Program instances."""
    from gradcompass.shared.schemas import Program

    return [Program.model_validate(item) for item in sample_program_data]


@pytest.fixture
def sample_program(sample_programs):
    """A single Program with a deadline."""
    return sample_programs[0]


@pytest.fixture
def facet_index(sample_programs):
    """FacetIndex of the sample catalog."""
    from gradcompass.search.facets import FacetIndex

    return FacetIndex.from_catalog(sample_programs)


@pytest.fixture
def sample_catalog(sample_programs):
    """Catalog of the sample programs."""
    from gradcompass.catalog import Catalog

    return Catalog(sample_programs)


@pytest.fixture
def catalog_file(temp_dir: Path, sample_program_data: list[dict]) -> Path:
    """Sample catalog written to a JSON file."""
    path = temp_dir / "programs.json"
    path.write_text(json.dumps(sample_program_data), encoding="utf-8")
    return path


@pytest.fixture
def sample_mentor_data() -> list[dict]:
    """Sample mentor records for testing."""
    return [
        {"id": "m1", "name": "Priya", "category": "Study Abroad", "rate": "$150/hr",
         "reviews": [{"id": "r1", "author": "A", "rating": 5}, {"id": "r2", "author": "B", "rating": 4}]},
        {"id": "m2", "name": "Daniel", "category": "Essay", "rate": "$90/hr"},
        {"id": "m3", "name": "Aisha", "category": "Resume", "rate": "$70/hr"},
        {"id": "m4", "name": "Kenji", "category": "Test Prep", "rate": "$60/hr"},
        {"id": "m5", "name": "Maria", "category": "Finance", "rate": "Free"},
    ]


@pytest.fixture
def sample_mentors(sample_mentor_data: list[dict]):
    """Sample Mentor instances."""
    from gradcompass.shared.schemas import Mentor

    return [Mentor.model_validate(item) for item in sample_mentor_data]


@pytest.fixture
def mentors_file(temp_dir: Path, sample_mentor_data: list[dict]) -> Path:
    """Sample mentors written to a JSON file."""
    path = temp_dir / "mentors.json"
    path.write_text(json.dumps(sample_mentor_data), encoding="utf-8")
    return path


@pytest.fixture
def sample_profile():
    """A filled-in UserProfile."""
    from gradcompass.shared.schemas import UserProfile

    return UserProfile(
        name="Asha",
        email="asha@example.com",
        degree_type="MS",
        target_major="Data Science",
        gpa="3.8",
        test_status="GRE Taken",
        budget="$40,000",
        countries=["Germany", "UK"],
        experience_years=2,
    )


# ─────────────────────────────────────────────────────────────────────────────
# Mock Fixtures
# ─────────────────────────────────────────────────────────────────────────────


class InMemoryProfileStore(ProfileStore):
    """ProfileStore double that keeps rows in a dict and can fail on demand."""

    def __init__(self, reject_profile_data: bool = False):
        self.rows: dict = {}
        self.writes: list = []
        self.access_token: Optional[str] = None
        self.reject_profile_data = reject_profile_data
        self.fail_reads = False
        self.fail_writes = False

    def fetch(self, user_id):
        if self.fail_reads:
            raise ProfileStoreError("read failed")
        return self.rows.get(user_id)

    def _write(self, record, insert):
        if self.fail_writes:
            raise ProfileStoreError("write failed")
        if self.reject_profile_data and record.profile_data is not None:
            raise ProfileStoreError("column profiles.profile_data does not exist")
        if insert and record.id in self.rows:
            raise ProfileStoreError("duplicate key")
        self.writes.append(record)
        existing = self.rows.get(record.id)
        if existing is not None and record.profile_data is None:
            record = record.model_copy(update={"profile_data": existing.profile_data})
        self.rows[record.id] = record

    def authorize(self, access_token):
        self.access_token = access_token


@pytest.fixture
def memory_store() -> InMemoryProfileStore:
    """In-memory profile store."""
    return InMemoryProfileStore()


@pytest.fixture
def fake_auth():
    """AuthClient double that accepts one password."""
    from gradcompass.journey.auth import AuthClient, AuthError, AuthSession

    class FakeAuth(AuthClient):
        def __init__(self):
            self.signed_out = []
            self.confirm_sign_up = True

        def sign_in(self, email, password):
            if password != "secret":
                raise AuthError("Sign in failed: Invalid login credentials")
            return AuthSession(user_id="user-1", email=email, access_token="token-1")

        def sign_up(self, name, email, password):
            token = "token-new" if self.confirm_sign_up else ""
            return AuthSession(user_id="user-new", email=email, access_token=token)

        def sign_out(self, session):
            self.signed_out.append(session.user_id)

    return FakeAuth()


@pytest.fixture
def journey_session(memory_store, fake_auth):
    """Signed-out JourneySession with in-memory collaborators."""
    from gradcompass.journey.session import JourneySession

    return JourneySession(memory_store, auth=fake_auth)


# ─────────────────────────────────────────────────────────────────────────────
# Singleton Reset
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset global singletons between tests."""
    import gradcompass.advisory.advisor as advisor_module
    from gradcompass.shared.config import get_settings

    advisor_module._advisor = None
    get_settings.cache_clear()

    yield

    advisor_module._advisor = None
    get_settings.cache_clear()
