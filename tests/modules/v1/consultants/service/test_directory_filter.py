from uuid import uuid4

from app.api.modules.v1.consultants.models.profile_model import ConsultantProfile
from app.api.modules.v1.consultants.schemas.profile_schema import DirectoryCriteria
from app.api.modules.v1.consultants.service.directory_filter import (
    DirectoryEntry,
    filter_consultants,
)


def _entry(name, headline=None, bio=None, standards=(), industries=(), regions=()):
    user_id = uuid4()
    profile = ConsultantProfile(
        user_id=user_id,
        headline=headline,
        bio=bio,
        standards=list(standards),
        industries=list(industries),
        regions=list(regions),
        verified=True,
    )
    return DirectoryEntry(user_id=user_id, name=name, email=f"{name}@example.com", profile=profile)


ALPHA = _entry(
    "alpha",
    headline="ISO 9001 lead auditor",
    standards=["ISO 9001", "ISO 14001"],
    industries=["Manufacturing"],
    regions=["EU"],
)
BRAVO = _entry(
    "bravo",
    bio="Information security specialist",
    standards=["ISO 27001"],
    industries=["Software"],
    regions=["US", "EU"],
)
CHARLIE = _entry("charlie", headline="Food safety", standards=["ISO 22000"], regions=["APAC"])

ENTRIES = [ALPHA, BRAVO, CHARLIE]


def test_no_criteria_returns_everything_in_order():
    assert filter_consultants(ENTRIES) == ENTRIES
    assert filter_consultants(ENTRIES, DirectoryCriteria()) == ENTRIES


def test_all_and_blank_disable_a_criterion():
    criteria = DirectoryCriteria(standard="all", industry="  ", region="All", search="  ")

    assert filter_consultants(ENTRIES, criteria) == ENTRIES


def test_standard_membership():
    criteria = DirectoryCriteria(standard="ISO 9001")

    assert filter_consultants(ENTRIES, criteria) == [ALPHA]


def test_region_membership_preserves_order():
    criteria = DirectoryCriteria(region="EU")

    assert filter_consultants(ENTRIES, criteria) == [ALPHA, BRAVO]


def test_search_is_case_insensitive_over_name_headline_and_bio():
    assert filter_consultants(ENTRIES, DirectoryCriteria(search="CHAR")) == [CHARLIE]
    assert filter_consultants(ENTRIES, DirectoryCriteria(search="lead AUDITOR")) == [ALPHA]
    assert filter_consultants(ENTRIES, DirectoryCriteria(search="security")) == [BRAVO]


def test_criteria_combine_with_and():
    criteria = DirectoryCriteria(region="EU", industry="Software")

    assert filter_consultants(ENTRIES, criteria) == [BRAVO]


def test_no_match_returns_empty_list():
    criteria = DirectoryCriteria(standard="ISO 50001")

    assert filter_consultants(ENTRIES, criteria) == []


def test_filter_does_not_mutate_input():
    entries = list(ENTRIES)

    filter_consultants(entries, DirectoryCriteria(standard="ISO 27001"))

    assert entries == ENTRIES


def test_search_for_all_is_a_substring_match():
    wallace = _entry("Wallace Audits")
    zed = _entry("Zed")

    assert filter_consultants([wallace, zed], DirectoryCriteria(search="all")) == [wallace]
    assert filter_consultants([wallace, zed], DirectoryCriteria(search="  ALL ")) == [wallace]
