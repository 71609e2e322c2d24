#!/usr/bin/env python3
"""
Input Models - Candidate and JobRequirement records consumed by the engine.

Records are immutable once built. from_dict() accepts snake_case keys as well
as the camelCase keys produced by the upstream JSON collaborators
(requiredSkills, currentLocation, experienceRequired.minYears, ...).
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple
import logging

from talent_match.exceptions import ValidationError

logger = logging.getLogger(__name__)

REMOTE_WORK_POLICIES = ('on-site', 'remote', 'hybrid', 'flexible')
REMOTE_FRIENDLY_POLICIES = ('remote', 'hybrid')

# Upstream aliases that mean "no remote option"
_ON_SITE_ALIASES = {'office', 'onsite', 'on site', 'in-office', ''}


def _get(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    """First present, non-None value among the given keys."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _str_tuple(values: Optional[Iterable[Any]]) -> Tuple[str, ...]:
    if values is None:
        return ()
    if isinstance(values, str):
        values = [values]
    items = []
    for value in values:
        # Parsed JDs sometimes carry {"skill": "java", "level": ...} entries
        if isinstance(value, dict):
            value = value.get('skill') or value.get('name')
        if value is not None and str(value).strip():
            items.append(str(value).strip())
    return tuple(items)


def _optional_float(value: Any) -> Optional[float]:
    if value is None or value == '':
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Expected a number, got {value!r}")


def _whole_number(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field}: expected a whole number, got {value!r}")
    try:
        return int(float(value))
    except (TypeError, ValueError):
        raise ValidationError(f"{field}: expected a whole number, got {value!r}")


def _require_mapping(value: Any, field: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ValidationError(f"{field}: expected an object, got {value!r}")
    return value


def normalize_remote_work(value: Optional[str]) -> str:
    """Map a free-form remote policy onto on-site|remote|hybrid|flexible."""
    policy = (value or '').strip().lower()
    if policy in _ON_SITE_ALIASES:
        return 'on-site'
    if policy in REMOTE_WORK_POLICIES:
        return policy
    logger.warning(f"Unknown remote work policy '{value}', treating as on-site")
    return 'on-site'


@dataclass(frozen=True)
class Experience:
    years: int = 0
    months: int = 0

    @property
    def total_years(self) -> float:
        """Decimal years (years + months / 12)."""
        return self.years + self.months / 12


@dataclass(frozen=True)
class Education:
    degree: str = ''
    specialization: str = ''


@dataclass(frozen=True)
class Candidate:
    """Candidate profile; identity fields are carried through but never scored."""
    id: str
    name: str = ''
    email: str = ''
    skills: Tuple[str, ...] = ()
    experience: Experience = Experience()
    current_location: str = ''
    preferred_locations: Tuple[str, ...] = ()
    education: Tuple[Education, ...] = ()
    current_ctc: Optional[float] = None
    expected_ctc: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Candidate':
        """
        Build a Candidate from a JSON object.

        Raises:
            ValidationError: the record or one of its numeric fields is malformed
        """
        _require_mapping(data, "candidate")
        experience = _get(data, 'experience', default={}) or {}
        if isinstance(experience, (int, float)) and not isinstance(experience, bool):
            experience = {'years': experience}
        _require_mapping(experience, "experience")

        education = tuple(
            Education(
                degree=str(_get(edu, 'degree', default='')),
                specialization=str(_get(edu, 'specialization', default=''))
            )
            for edu in (_get(data, 'education', default=[]) or [])
            if isinstance(edu, dict)
        )

        return cls(
            id=str(_get(data, 'id', '_id', 'candidateId', default='')),
            name=str(_get(data, 'name', default='')),
            email=str(_get(data, 'email', default='')),
            skills=_str_tuple(_get(data, 'skills')),
            experience=Experience(
                years=_whole_number(_get(experience, 'years', default=0), "experience.years"),
                months=_whole_number(_get(experience, 'months', default=0), "experience.months")
            ),
            current_location=str(_get(data, 'current_location', 'currentLocation', default='')),
            preferred_locations=_str_tuple(
                _get(data, 'preferred_locations', 'preferredLocation', 'preferredLocations')
            ),
            education=education,
            current_ctc=_optional_float(_get(data, 'current_ctc', 'currentCTC')),
            expected_ctc=_optional_float(_get(data, 'expected_ctc', 'expectedCTC')),
        )


@dataclass(frozen=True)
class ExperienceBand:
    min_years: float = 0.0
    max_years: Optional[float] = None  # None = unbounded


@dataclass(frozen=True)
class EducationRequirement:
    degree: str = ''
    specialization: str = ''
    is_mandatory: bool = False


@dataclass(frozen=True)
class SalaryRange:
    min: float
    max: float
    currency: str = 'INR'


@dataclass(frozen=True)
class JobRequirement:
    """Structured job requirement set driving a match run."""
    id: str = ''
    title: str = ''
    required_skills: Tuple[str, ...] = ()
    preferred_skills: Tuple[str, ...] = ()
    technologies: Tuple[str, ...] = ()
    experience_required: ExperienceBand = ExperienceBand()
    job_location: str = ''
    preferred_locations: Tuple[str, ...] = ()
    remote_work: str = 'on-site'
    education_requirements: Tuple[EducationRequirement, ...] = ()
    salary_range: Optional[SalaryRange] = None

    @property
    def is_remote_friendly(self) -> bool:
        return self.remote_work in REMOTE_FRIENDLY_POLICIES

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'JobRequirement':
        _require_mapping(data, "requirement")
        band = _require_mapping(
            _get(data, 'experience_required', 'experienceRequired', default={}) or {},
            "experienceRequired"
        )
        min_years = _optional_float(_get(band, 'min_years', 'minYears'))
        max_years = _optional_float(_get(band, 'max_years', 'maxYears'))

        education = tuple(
            EducationRequirement(
                degree=str(_get(req, 'degree', default='')),
                specialization=str(_get(req, 'specialization', default='')),
                is_mandatory=bool(_get(req, 'is_mandatory', 'isMandatory', default=False))
            )
            for req in (_get(data, 'education_requirements', 'educationRequirements', default=[]) or [])
            if isinstance(req, dict)
        )

        salary = _get(data, 'salary_range', 'salaryRange')
        salary_range = None
        if isinstance(salary, dict) and salary.get('min') is not None and salary.get('max') is not None:
            salary_range = SalaryRange(
                min=_optional_float(salary['min']),
                max=_optional_float(salary['max']),
                currency=str(salary.get('currency') or 'INR')
            )

        return cls(
            id=str(_get(data, 'id', '_id', default='')),
            title=str(_get(data, 'title', 'jobTitle', default='')),
            required_skills=_str_tuple(_get(data, 'required_skills', 'requiredSkills')),
            preferred_skills=_str_tuple(_get(data, 'preferred_skills', 'preferredSkills')),
            technologies=_str_tuple(_get(data, 'technologies')),
            experience_required=ExperienceBand(
                min_years=min_years or 0.0,
                max_years=max_years
            ),
            job_location=str(_get(data, 'job_location', 'jobLocation', default='')),
            preferred_locations=_str_tuple(_get(data, 'preferred_locations', 'preferredLocations')),
            remote_work=normalize_remote_work(_get(data, 'remote_work', 'remoteWork')),
            education_requirements=education,
            salary_range=salary_range,
        )


def validate_candidate(candidate: Candidate) -> None:
    """Raise ValidationError for records that would produce nonsense scores."""
    experience = candidate.experience
    if experience.years < 0 or experience.months < 0:
        raise ValidationError(
            f"Candidate {candidate.id}: negative experience "
            f"(years={experience.years}, months={experience.months})"
        )


def validate_requirement(requirement: JobRequirement) -> None:
    """Raise ValidationError when the experience band is not well-formed."""
    band = requirement.experience_required
    if band.min_years < 0:
        raise ValidationError(
            f"Requirement {requirement.id}: negative experience min_years={band.min_years}"
        )
    if band.max_years is not None and band.min_years > band.max_years:
        raise ValidationError(
            f"Requirement {requirement.id}: experience min_years={band.min_years} "
            f"exceeds max_years={band.max_years}"
        )
