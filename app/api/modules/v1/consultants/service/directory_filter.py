"""In-memory consultant directory filtering."""

from dataclasses import dataclass
from typing import Iterable, List, Optional
from uuid import UUID

from app.api.modules.v1.consultants.models.profile_model import ConsultantProfile
from app.api.modules.v1.consultants.schemas.profile_schema import DirectoryCriteria


@dataclass(frozen=True)
class DirectoryEntry:
    user_id: UUID
    name: str
    email: str
    profile: ConsultantProfile


def _contains(text: Optional[str], needle: str) -> bool:
    return bool(text) and needle in text.lower()


def matches(entry: DirectoryEntry, criteria: DirectoryCriteria) -> bool:
    """Return True when the entry satisfies every active criterion."""
    profile = entry.profile

    if criteria.standard and criteria.standard not in (profile.standards or []):
        return False
    if criteria.industry and criteria.industry not in (profile.industries or []):
        return False
    if criteria.region and criteria.region not in (profile.regions or []):
        return False

    if criteria.search:
        needle = criteria.search.lower()
        if not (
            _contains(entry.name, needle)
            or _contains(profile.headline, needle)
            or _contains(profile.bio, needle)
        ):
            return False

    return True


def filter_consultants(
    entries: Iterable[DirectoryEntry], criteria: Optional[DirectoryCriteria] = None
) -> List[DirectoryEntry]:
    """
    Filter an already materialized collection of directory entries.

    Input order is preserved. `search` is a case-insensitive substring match on
    name, headline or bio; `standard`, `industry` and `region` must be members
    of the corresponding profile set. Inactive criteria match everything.

    Args:
        entries: Directory entries, normally verified consultants only.
        criteria: Filter values; None behaves like no filters.

    Returns:
        List of matching entries in input order.
    """
    criteria = criteria or DirectoryCriteria()
    return [entry for entry in entries if matches(entry, criteria)]
