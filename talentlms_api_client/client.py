"""
Client implementation for the TalentLMS REST API.

This module defines the :class:`TalentLmsClient` class which
authenticates against a TalentLMS site using its API key and performs
HTTP requests against the ``/api/v1`` endpoints.  Responses are
deserialised into the typed records of :mod:`talentlms_api_client.models`.

Usage
-----

.. code-block:: python

    from talentlms_api_client import TalentLmsClient

    # Address a site hosted on talentlms.com by its subdomain
    client = TalentLmsClient(api_key="myapikey", subdomain="acme")

    # ... or a site on its own domain
    client = TalentLmsClient(api_key="myapikey", domain="learn.acme.com")

    for user in client.get_all_users():
        print(user.login, user.email)

    learners = client.get_users_by_course_code("ONBOARD-101")

Every call goes to the server; nothing is cached between calls.  Errors
are raised as subclasses of :class:`~talentlms_api_client.exceptions.TalentLmsError`.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, List, Optional, Sequence, Type, TypeVar, Union

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError

from .config import TalentLmsSettings
from .exceptions import ApiError, ConfigurationError, NotFoundError, RequestError
from .models import Course, CourseUser, User

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

#: Custom fields that hold a user's phone number on a default TalentLMS site.
DEFAULT_PHONE_FIELDS = ("custom_field_7", "custom_field_8")


@functools.lru_cache(maxsize=None)
def _list_adapter(model: Type[BaseModel]) -> TypeAdapter:
    """Return the validator for a JSON array of ``model`` records."""
    return TypeAdapter(List[model])


class TalentLmsClient:
    """A simple client for the TalentLMS REST API.

    Parameters
    ----------
    api_key : str
        The API key of your TalentLMS site, found under
        *Account & Settings > Integrations > API*.  It is sent as the
        username of an HTTP Basic ``Authorization`` header with an empty
        password.
    domain : str, optional
        The full host name of a site served from its own domain, such as
        ``"learn.example.com"``.  Used verbatim.
    subdomain : str, optional
        The bare subdomain of a site hosted on ``talentlms.com``.  Takes
        precedence over ``domain`` when both are given.
    timeout : float, optional
        Timeout in seconds applied to every HTTP request.  ``None`` (the
        default) waits indefinitely.

    Raises
    ------
    ConfigurationError
        If ``api_key`` is empty, or if neither ``domain`` nor
        ``subdomain`` is given.
    """

    _HOSTED_SUFFIX = "talentlms.com"
    _API_PATH = "api/v1"

    def __init__(
        self,
        *,
        api_key: str,
        domain: Optional[str] = None,
        subdomain: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError("api_key must be provided")
        if not subdomain and not domain:
            raise ConfigurationError("Either subdomain or domain must be provided")

        self._api_key = api_key
        self.domain = domain or None
        self.subdomain = subdomain or None
        self.timeout = timeout

        if self.subdomain:
            host = f"{self.subdomain}.{self._HOSTED_SUFFIX}"
        else:
            host = self.domain
        self._base_url = f"https://{host}/{self._API_PATH}"

    @classmethod
    def from_settings(cls, settings: Optional[TalentLmsSettings] = None) -> "TalentLmsClient":
        """Create a client from :class:`TalentLmsSettings`.

        When ``settings`` is omitted they are loaded from the
        ``TALENTLMS_*`` environment variables (and a ``.env`` file, if
        present).
        """
        if settings is None:
            settings = TalentLmsSettings()
        return cls(
            api_key=settings.api_key,
            domain=settings.domain,
            subdomain=settings.subdomain,
            timeout=settings.timeout_seconds,
        )

    @property
    def base_url(self) -> str:
        """The API root all endpoints are resolved against."""
        return self._base_url

    def __repr__(self) -> str:
        return f"<TalentLmsClient base_url={self._base_url!r}>"

    # ------------------------------------------------------------------
    # HTTP request helpers
    # ------------------------------------------------------------------
    def _prepare_url(self, endpoint: str) -> str:
        """Join a relative endpoint such as ``users/id:1`` to the base URL.

        The endpoint must already be percent-encoded where needed; it is
        not escaped again here.
        """
        return f"{self._base_url}/{endpoint.lstrip('/')}"

    def _request(self, endpoint: str, method: str = "GET", body: Optional[Any] = None) -> Any:
        """Perform an HTTP request against the TalentLMS API.

        Parameters
        ----------
        endpoint : str
            The endpoint path relative to ``/api/v1``.
        method : str, optional
            The HTTP verb.  Defaults to ``"GET"``.
        body : object, optional
            A JSON-serialisable request body.  Nothing is sent when it
            is ``None``.

        Returns
        -------
        Any
            The parsed JSON body of the response.

        Raises
        ------
        ApiError
            If the response status is not a success code (2xx).  The
            message is taken from the ``error.message`` field of a JSON
            error body, falling back to the HTTP reason phrase.
        RequestError
            If the request could not be sent or the response body is not
            valid JSON.
        """
        url = self._prepare_url(endpoint)
        headers = {"Content-Type": "application/json"}
        logger.debug("TalentLMS %s %s", method.upper(), url)
        try:
            response = requests.request(
                method=method.upper(),
                url=url,
                json=body,
                headers=headers,
                auth=(self._api_key, ""),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise RequestError(f"Request failed: {exc}") from exc

        logger.debug("TalentLMS %s %s -> %s", method.upper(), url, response.status_code)
        if not 200 <= response.status_code < 300:
            raise ApiError(response.status_code, self._error_message(response))

        try:
            return response.json()
        except ValueError as exc:
            raise RequestError(f"Request failed: invalid JSON from {url}: {exc}") from exc

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        """Extract ``error.message`` from an error response body."""
        message = response.reason or ""
        try:
            payload = response.json()
        except ValueError:
            return message
        if isinstance(payload, dict):
            error = payload.get("error")
            if isinstance(error, dict) and error.get("message"):
                return str(error["message"])
        return message

    @staticmethod
    def _parse(model: Type[ModelT], payload: Any) -> ModelT:
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise RequestError(f"Request failed: malformed {model.__name__} payload: {exc}") from exc

    @staticmethod
    def _parse_list(model: Type[ModelT], payload: Any) -> List[ModelT]:
        try:
            return _list_adapter(model).validate_python(payload)
        except ValidationError as exc:
            raise RequestError(
                f"Request failed: malformed {model.__name__} list payload: {exc}"
            ) from exc

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def get_all_users(self) -> List[User]:
        """Return every user of the site."""
        return self._parse_list(User, self._request("users"))

    def get_user_by_id(self, user_id: Union[str, int]) -> User:
        """Return the user with the given id."""
        return self._parse(User, self._request(f"users/id:{user_id}"))

    def get_user_by_email(self, email: str) -> User:
        """Return the user with the given email address."""
        return self._parse(User, self._request(f"users/email:{email}"))

    def get_user_by_phone(
        self,
        phone: str,
        custom_field_names: Union[str, Sequence[str]] = DEFAULT_PHONE_FIELDS,
    ) -> List[User]:
        """Find the users whose phone number is ``phone``.

        TalentLMS has no phone field, so sites keep the number in custom
        fields, sometimes split across several of them (area code in one,
        number in another).  A user matches when any of the named fields
        equals ``phone`` exactly, or when the values of all named fields
        joined in order without a separator equal ``phone``.  A missing
        field never matches on its own and counts as empty when joined.

        The whole user list is fetched and filtered locally.

        Parameters
        ----------
        phone : str
            The phone number to look for, compared verbatim.
        custom_field_names : str or sequence of str, optional
            The custom fields holding the number, in order.  A
            comma-separated string such as
            ``"custom_field_7,custom_field_8"`` is also accepted.

        Returns
        -------
        list of User
            The matching users in server order; empty when none match.
        """
        if isinstance(custom_field_names, str):
            fields = [name.strip() for name in custom_field_names.split(",")]
        else:
            fields = list(custom_field_names)

        matches = []
        for user in self.get_all_users():
            values = [user.custom_field(name) for name in fields]
            if phone in values or "".join(value or "" for value in values) == phone:
                matches.append(user)
        return matches

    # ------------------------------------------------------------------
    # Courses
    # ------------------------------------------------------------------
    def get_all_courses(self) -> List[Course]:
        """Return every course of the site.

        The list endpoint does not include enrolled users, units or
        prerequisites; use :meth:`get_course_by_id` for those.
        """
        return self._parse_list(Course, self._request("courses"))

    def get_course_by_id(self, course_id: Union[str, int]) -> Course:
        """Return the course with the given id, including its collections."""
        return self._parse(Course, self._request(f"courses/id:{course_id}"))

    def get_course_by_code(self, code: str) -> Optional[Course]:
        """Return the first course whose code is exactly ``code``.

        Returns ``None`` when no course has that code.
        """
        for course in self.get_all_courses():
            if course.code == code:
                return course
        return None

    def get_users_by_course_code(self, code: str) -> List[CourseUser]:
        """Return the users enrolled in the course with code ``code``.

        The enrollment list is returned as sent: every key of every
        element is kept, including progress and timing fields, and
        :meth:`CourseUser.as_dict` reproduces the server's object.

        Raises
        ------
        NotFoundError
            If no course has that code.  Only the course list has been
            requested in that case.
        """
        course = self.get_course_by_code(code)
        if course is None:
            raise NotFoundError(code)
        return self._parse_list(CourseUser, self._request(f"courses/id:{course.id}/users"))
