"""
Typed records returned by the TalentLMS API.

TalentLMS serialises almost every scalar as a string, including
identifiers, dates and flags, so most fields are plain optional strings.
Numeric timestamps that the service sends as numbers are typed ``int``.
Unknown keys are ignored so that additions on the server side do not
break deserialisation, except on enrollment records, which keep the
payload whole.

All records are frozen: they are projections of server state at the
time of the call and are never mutated locally.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

#: Prefix TalentLMS uses for the keys of user defined profile fields.
CUSTOM_FIELD_PREFIX = "custom_field_"

#: Scalar as sent by the service, kept without coercion.
Scalar = Union[str, int, float]


class TalentLmsModel(BaseModel):
    """Base class for all TalentLMS records."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )


class Branch(TalentLmsModel):
    id: Optional[str] = None
    name: Optional[str] = None


class Group(TalentLmsModel):
    id: Optional[str] = None
    name: Optional[str] = None


class Certification(TalentLmsModel):
    """A certification a user earned by completing a course."""

    course_id: Optional[str] = None
    course_name: Optional[str] = None
    unique_id: Optional[str] = None
    issued_date: Optional[str] = None
    issued_date_timestamp: Optional[int] = None
    expiration_date: Optional[str] = None
    expiration_date_timestamp: Optional[int] = None
    download_url: Optional[str] = None
    public_url: Optional[str] = None


class Badge(TalentLmsModel):
    name: Optional[str] = None
    type: Optional[str] = None
    image_url: Optional[str] = None
    criteria: Optional[str] = None
    issued_on: Optional[str] = None
    issued_on_timestamp: Optional[int] = None


class CourseUser(TalentLmsModel):
    """A user's enrollment in a course.

    This carries per-course progress and is distinct from the global
    :class:`User` record of the same person.  Enrollment records are kept
    exactly as the server sent them: scalars are not coerced and keys
    not declared below are retained (and readable as attributes), so
    :meth:`as_dict` gives back the original payload.
    """

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=False)

    id: Optional[Scalar] = None
    name: Optional[Scalar] = None
    role: Optional[str] = None
    enrolled_on: Optional[str] = None
    enrolled_on_timestamp: Optional[Scalar] = None
    completed_on: Optional[str] = None
    completed_on_timestamp: Optional[Scalar] = None
    completion_percentage: Optional[Scalar] = None
    expired_on: Optional[str] = None
    expired_on_timestamp: Optional[Scalar] = None
    total_time: Optional[str] = None
    total_time_seconds: Optional[Scalar] = None

    def as_dict(self) -> Dict[str, Any]:
        """Return the record as the JSON object it was parsed from."""
        return {**self.model_dump(exclude_unset=True), **(self.model_extra or {})}


class CourseUnit(TalentLmsModel):
    id: Optional[str] = None
    type: Optional[str] = None
    name: Optional[str] = None
    url: Optional[str] = None
    delay_time: Optional[str] = None
    aggregated_delay_time: Optional[str] = None
    formatted_aggregated_delay_time: Optional[str] = None


class CoursePrerequisite(TalentLmsModel):
    course_id: Optional[str] = None
    course_name: Optional[str] = None


class CoursePrerequisiteRuleSet(TalentLmsModel):
    course_id: Optional[str] = None
    course_name: Optional[str] = None
    rule_set: Optional[str] = None


class CourseListItem(TalentLmsModel):
    """A course as it appears in the course list."""

    id: str
    name: Optional[str] = None
    code: Optional[str] = None
    category_id: Optional[str] = None
    description: Optional[str] = None
    price: Optional[str] = None
    status: Optional[str] = None
    creation_date: Optional[str] = None
    last_update_on: Optional[str] = None
    creator_id: Optional[str] = None
    hide_from_catalog: Optional[str] = None
    time_limit: Optional[str] = None
    start_datetime: Optional[str] = None
    expiration_datetime: Optional[str] = None
    level: Optional[str] = None
    shared: Optional[str] = None
    shared_url: Optional[str] = None
    avatar: Optional[str] = None
    big_avatar: Optional[str] = None
    certification: Optional[str] = None
    certification_duration: Optional[str] = None


class Course(CourseListItem):
    """A course together with the collections returned when it is
    fetched individually.

    The course list endpoint omits the nested collections, in which case
    they are empty.
    """

    users: List[CourseUser] = []
    units: List[CourseUnit] = []
    rules: List[str] = []
    prerequisites: List[CoursePrerequisite] = []
    prerequisite_rule_sets: List[CoursePrerequisiteRuleSet] = []

    @field_validator(
        "users", "units", "rules", "prerequisites", "prerequisite_rule_sets",
        mode="before",
    )
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class User(TalentLmsModel):
    """A TalentLMS user.

    Besides the first class profile fields, every ``custom_field_N`` key
    of the payload is collected into :attr:`custom_fields`, a mapping
    from field name to value.  Custom fields whose value is ``null`` are
    left out.
    """

    id: str
    login: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    restrict_email: Optional[str] = None
    user_type: Optional[str] = None
    timezone: Optional[str] = None
    language: Optional[str] = None
    status: Optional[str] = None
    deactivation_date: Optional[str] = None
    level: Optional[str] = None
    points: Optional[str] = None
    credits: Optional[str] = None
    created_on: Optional[str] = None
    last_updated: Optional[str] = None
    last_updated_timestamp: Optional[str] = None
    avatar: Optional[str] = None
    bio: Optional[str] = None
    login_key: Optional[str] = None
    courses: Optional[List[CourseListItem]] = None
    branches: Optional[List[Branch]] = None
    groups: Optional[List[Group]] = None
    certifications: Optional[List[Certification]] = None
    badges: Optional[List[Badge]] = None
    custom_fields: Dict[str, str] = {}

    @model_validator(mode="before")
    @classmethod
    def _collect_custom_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        custom = dict(data.get("custom_fields") or {})
        for key, value in data.items():
            if key.startswith(CUSTOM_FIELD_PREFIX) and value is not None:
                custom[key] = str(value)
        return {**data, "custom_fields": custom}

    def custom_field(self, name: str) -> Optional[str]:
        """Return the value of the custom field ``name``, if set."""
        return self.custom_fields.get(name)
