"""
Python client for interacting with the TalentLMS REST API.

This package provides a `TalentLmsClient` class that authenticates
against a TalentLMS site with its API key, calls the ``/api/v1``
endpoints and returns typed `User` and `Course` records.

Examples
--------

```python
from talentlms_api_client import TalentLmsClient

client = TalentLmsClient(api_key="YOUR_API_KEY", subdomain="yourcompany")

user = client.get_user_by_email("jane@example.com")
print(user.first_name, user.custom_fields)

# Composite lookups filter on the client side
matches = client.get_user_by_phone("5551234567")
course = client.get_course_by_code("SAFETY-01")   # None when absent
learners = client.get_users_by_course_code("SAFETY-01")  # raises NotFoundError
```

The client can also be built from ``TALENTLMS_API_KEY``,
``TALENTLMS_SUBDOMAIN`` (or ``TALENTLMS_DOMAIN``) and
``TALENTLMS_TIMEOUT_SECONDS``:

```python
client = TalentLmsClient.from_settings()
```

The package logs request tracing at DEBUG level on the
``talentlms_api_client`` logger and is silent unless the application
configures logging.
"""

import logging

from .client import TalentLmsClient
from .config import TalentLmsSettings
from .exceptions import (
    ApiError,
    ConfigurationError,
    NotFoundError,
    RequestError,
    TalentLmsError,
)
from .models import (
    Badge,
    Branch,
    Certification,
    Course,
    CourseListItem,
    CoursePrerequisite,
    CoursePrerequisiteRuleSet,
    CourseUnit,
    CourseUser,
    Group,
    User,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "TalentLmsClient",
    "TalentLmsSettings",
    "TalentLmsError",
    "ConfigurationError",
    "ApiError",
    "RequestError",
    "NotFoundError",
    "User",
    "Course",
    "CourseListItem",
    "CourseUser",
    "CourseUnit",
    "CoursePrerequisite",
    "CoursePrerequisiteRuleSet",
    "Branch",
    "Group",
    "Certification",
    "Badge",
]
