"""
Schemas Module - Pydantic data models for the application.
==========================================================

Defines the data contracts shared across the application:
- Program catalog records (with fees, scholarships, placements)
- User profile and its builder sections
- Application set items, tiers and statuses
- Mentors and reviews

Records are read from and written to JSON with camelCase keys
(``programName``, ``degreeType``) so the catalog files and the stored
``profile_data`` blobs stay compatible with the web client. Python code
uses the snake_case attribute names.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, computed_field
from pydantic.alias_generators import to_camel


# ─────────────────────────────────────────────────────────────────────────────
# Enums
# ─────────────────────────────────────────────────────────────────────────────


class Tier(str, Enum):
    """How ambitious an application is relative to the student's profile."""

    DREAM_SHOT = "Dream Shot"
    REACH = "Reach"
    ACHIEVABLE = "Achievable"
    SAFE = "Safe"


class AppStatus(str, Enum):
    """Application lifecycle status."""

    PLANNING = "Planning"
    APPLIED = "Applied"
    ADMITTED = "Admitted"
    REJECTED = "Rejected"
    WAITLISTED = "Waitlisted"


class Probability(str, Enum):
    """Qualitative likelihood used by scholarships and task priorities."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class MentorCategory(str, Enum):
    """Mentor specialisation categories."""

    STUDY_ABROAD = "Study Abroad"
    ESSAY = "Essay"
    RESUME = "Resume"
    TEST_PREP = "Test Prep"
    FINANCE = "Finance"


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON keys."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "use_enum_values": True,
    }

    def to_json_dict(self) -> dict:
        """Dump to a JSON-ready dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


# ─────────────────────────────────────────────────────────────────────────────
# Program Catalog Models
# ─────────────────────────────────────────────────────────────────────────────


class Fees(CamelModel):
    """Yearly cost of living on top of tuition (USD)."""

    living: float = 0
    accommodation: float = 0
    misc: float = 0


class Scholarship(CamelModel):
    """A scholarship offered by a program."""

    name: str
    amount: str
    probability: Probability = Probability.MEDIUM


class PlacementStats(CamelModel):
    """Career outcomes reported by a program."""

    median_salary: float = 0
    employment_rate: str = ""
    top_employers: list[str] = Field(default_factory=list)


class Program(CamelModel):
    """
    A single program in the catalog.

    Programs are supplied by the catalog data file and never mutated. The
    categorical fields (degree type, specialization, country, city,
    university) are the search facets.
    """

    model_config = {**CamelModel.model_config, "frozen": True}

    # Identity
    id: str = Field(..., min_length=1, description="Unique program identifier")
    university: str = Field(..., min_length=1, description="University name")
    program_name: str = Field(..., description="Program title")

    # Facets
    degree_type: str = Field(..., min_length=1, description="e.g. 'MBA', 'MS', 'UG'")
    specialization: str = Field(..., min_length=1, description="e.g. 'Marketing', 'Data Science'")
    country: str = Field(..., min_length=1, description="Country name")
    city: str = Field(..., min_length=1, description="City name")

    # Rankings and headline numbers
    qs_ranking: int = Field(default=0, description="QS world ranking")
    subject_ranking: Optional[int] = Field(default=None, description="QS subject ranking")
    tuition: float = Field(..., ge=0, description="Yearly tuition in USD")
    duration: str = ""
    acceptance_rate: str = ""
    tags: list[str] = Field(default_factory=list)
    description: str = ""
    deadline: Optional[str] = None

    # Detail sections
    fees: Fees = Field(default_factory=Fees)
    scholarships: list[Scholarship] = Field(default_factory=list)
    placements: PlacementStats = Field(default_factory=PlacementStats)
    prerequisites: list[str] = Field(default_factory=list)
    interview_required: bool = False
    interview_sample_questions: Optional[list[str]] = None
    city_safety_score: str = ""
    accommodation_options: list[str] = Field(default_factory=list)

    @computed_field
    @property
    def total_annual_cost(self) -> float:
        """Tuition plus living, accommodation and misc fees."""
        return self.tuition + self.fees.living + self.fees.accommodation + self.fees.misc


class ApplicationSetItem(Program):
    """A shortlisted program the student has committed to applying for."""

    status: AppStatus = AppStatus.PLANNING
    round: str = "Round 1"
    app_deadline: str = ""
    tier: Tier = Tier.REACH
    fit_score: Optional[float] = None


# ─────────────────────────────────────────────────────────────────────────────
# Profile Models
# ─────────────────────────────────────────────────────────────────────────────


class EducationEntry(CamelModel):
    """A completed or ongoing degree."""

    level: str
    institution: str
    gpa: str = ""
    score_type: str = Field(default="GPA", description="GPA, Percentage or CGPA")
    graduation_year: str = ""


class ExamScore(CamelModel):
    """A standardized test the student has planned or taken."""

    type: str = Field(..., description="GMAT, GRE, IELTS, TOEFL or SAT")
    status: str = Field(default="Planned", description="Planned or Taken")
    score: Optional[str] = None
    date: Optional[str] = None


class WorkExperience(CamelModel):
    """An internship or full-time role."""

    role: str
    company: str
    duration: str = ""
    type: str = Field(default="Full-time", description="Internship or Full-time")
    description: str = ""


class Activity(CamelModel):
    """A leadership, volunteering, club or sports activity."""

    title: str
    type: str = Field(default="Club", description="Leadership, Volunteering, Club or Sports")
    description: str = ""


class UserProfile(CamelModel):
    """
    The student's profile.

    Stored remotely as a whole object (``profile_data``) and replaced on
    every save; the shortlist lives inside it.
    """

    name: str = ""
    email: str = ""
    degree_type: str = ""
    target_major: str = ""
    gpa: str = ""
    test_status: str = ""
    budget: str = ""
    countries: list[str] = Field(default_factory=list)
    experience_years: int = 0
    saved_shortlist: list[Program] = Field(default_factory=list)

    # Profile builder sections
    skills: list[str] = Field(default_factory=list)
    projects: list[str] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)
    leadership: list[str] = Field(default_factory=list)
    career_goals: str = ""

    education: list[EducationEntry] = Field(default_factory=list)
    tests: list[ExamScore] = Field(default_factory=list)
    work_experience: list[WorkExperience] = Field(default_factory=list)
    activities: list[Activity] = Field(default_factory=list)


INITIAL_PROFILE = UserProfile()


# ─────────────────────────────────────────────────────────────────────────────
# Mentor Models
# ─────────────────────────────────────────────────────────────────────────────


class MentorReview(CamelModel):
    """A review left for a mentor."""

    id: str
    author: str
    rating: float = Field(..., ge=0, le=5)
    text: str = ""


class Mentor(CamelModel):
    """A bookable mentor."""

    id: str
    name: str
    title: str = ""
    specialties: list[str] = Field(default_factory=list)
    image_url: str = ""
    category: MentorCategory
    rate: str = ""
    best_for: Optional[str] = None
    bio: str = ""
    experience_years: int = 0
    reviews: list[MentorReview] = Field(default_factory=list)
    availability: list[str] = Field(default_factory=list, description="Next open slots")

    @property
    def average_rating(self) -> Optional[float]:
        """Mean review rating, or None without reviews."""
        if not self.reviews:
            return None
        return sum(r.rating for r in self.reviews) / len(self.reviews)

