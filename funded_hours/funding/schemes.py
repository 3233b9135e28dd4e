"""UK early years funding scheme catalog"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from ..utils.time import TERM_WEEKS, age_in_months


class SchemeId(str, Enum):
    """Closed set of funding schemes a child can be entitled to."""
    UNIVERSAL_15 = "universal_15"
    ELIGIBLE_2YR = "eligible_2yr"
    EXTENDED_30 = "extended_30"
    EXPANDED_UNDER2 = "expanded_under2"


@dataclass(frozen=True)
class FundingScheme:
    """A funding scheme definition. Catalog constants, never edited at runtime."""
    id: SchemeId
    name: str
    description: str
    hours_per_year: int
    weeks_term_time: int
    age_min: float                                   # Inclusive, years
    age_max: float                                   # Inclusive, years
    display_color: str


FUNDING_SCHEMES: Mapping[SchemeId, FundingScheme] = MappingProxyType({
    SchemeId.UNIVERSAL_15: FundingScheme(
        id=SchemeId.UNIVERSAL_15,
        name="15 Hours Universal",
        description="All 3-4 year olds",
        hours_per_year=570,
        weeks_term_time=TERM_WEEKS,
        age_min=3,
        age_max=4,
        display_color="#3B82F6",
    ),
    SchemeId.ELIGIBLE_2YR: FundingScheme(
        id=SchemeId.ELIGIBLE_2YR,
        name="15 Hours (Eligible 2yr)",
        description="Eligible 2 year olds",
        hours_per_year=570,
        weeks_term_time=TERM_WEEKS,
        age_min=2,
        age_max=2,
        display_color="#8B5CF6",
    ),
    SchemeId.EXTENDED_30: FundingScheme(
        id=SchemeId.EXTENDED_30,
        name="30 Hours Extended",
        description="Working parents 3-4yr olds",
        hours_per_year=1140,
        weeks_term_time=TERM_WEEKS,
        age_min=3,
        age_max=4,
        display_color="#10B981",
    ),
    SchemeId.EXPANDED_UNDER2: FundingScheme(
        id=SchemeId.EXPANDED_UNDER2,
        name="15 Hours Expanded",
        description="Working parents 9mo-2yr",
        hours_per_year=570,
        weeks_term_time=TERM_WEEKS,
        age_min=0.75,
        age_max=2,
        display_color="#F59E0B",
    ),
})


def find_scheme(scheme_id: str) -> Optional[FundingScheme]:
    """
    Look up a funding scheme by id.

    Args:
        scheme_id: SchemeId member or its string value

    Returns:
        The scheme, or None if the id is not in the catalog
    """
    try:
        return FUNDING_SCHEMES.get(SchemeId(scheme_id))
    except ValueError:
        return None


def list_schemes() -> list[FundingScheme]:
    """All schemes in catalog order."""
    return list(FUNDING_SCHEMES.values())


def is_age_eligible(scheme: FundingScheme, age_years: float) -> bool:
    """
    Check whether an age falls inside a scheme's inclusive age band.

    The upper bound covers the whole final year, so a child aged 4 years
    and 11 months is still inside a band ending at 4.
    """
    return scheme.age_min <= age_years < scheme.age_max + 1


def eligible_schemes(date_of_birth: date, as_of: date) -> list[FundingScheme]:
    """
    Schemes whose age band contains the child's age on the given date.

    Age bands only; income and working-parent criteria are not checked.
    """
    age_years = age_in_months(date_of_birth, as_of) / 12
    return [scheme for scheme in list_schemes() if is_age_eligible(scheme, age_years)]


def scheme_key(scheme_id: object) -> str:
    """Plain string form of a scheme id, for records and log fields."""
    if isinstance(scheme_id, SchemeId):
        return scheme_id.value
    return str(scheme_id)
