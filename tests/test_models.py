from talentlms_api_client import Course, User


def test_user_collects_custom_fields():
    user = User.model_validate(
        {
            "id": "7",
            "login": "ada",
            "custom_field_7": "555",
            "custom_field_8": "1234",
            "custom_field_9": None,
            "custom_field_12": 42,
        }
    )

    assert user.custom_fields == {
        "custom_field_7": "555",
        "custom_field_8": "1234",
        "custom_field_12": "42",
    }
    assert user.custom_field("custom_field_7") == "555"
    assert user.custom_field("custom_field_9") is None


def test_user_nested_summaries():
    user = User.model_validate(
        {
            "id": 1,
            "login": "ada",
            "bio": None,
            "branches": [{"id": "3", "name": "EMEA"}],
            "groups": [{"id": "4", "name": "Sales"}],
            "certifications": [
                {
                    "course_id": "2",
                    "course_name": "Safety",
                    "unique_id": "abc",
                    "issued_date": "01/01/2024",
                    "issued_date_timestamp": 1704067200,
                }
            ],
            "badges": [{"name": "Starter", "type": "activity", "issued_on_timestamp": "1704067200"}],
            "courses": [{"id": "2", "name": "Safety", "role": "learner"}],
            "some_new_server_field": "ignored",
        }
    )

    assert user.id == "1"
    assert user.branches[0].name == "EMEA"
    assert user.groups[0].id == "4"
    assert user.certifications[0].issued_date_timestamp == 1704067200
    assert user.badges[0].issued_on_timestamp == 1704067200
    assert user.courses[0].name == "Safety"
    assert user.custom_fields == {}


def test_user_without_collections():
    user = User.model_validate({"id": "1"})
    assert user.courses is None
    assert user.badges is None


def test_course_detail_collections():
    course = Course.model_validate(
        {
            "id": "2",
            "name": "Safety",
            "code": "SAF-1",
            "price": "&#36;0.00",
            "start_datetime": None,
            "users": [
                {
                    "id": "1",
                    "name": "A. Lovelace",
                    "role": "learner",
                    "completion_percentage": "50",
                    "total_time_seconds": 3600,
                }
            ],
            "units": [{"id": "10", "type": "Content", "name": "Intro"}],
            "rules": ["All units must be completed"],
            "prerequisites": [{"course_id": "1", "course_name": "Basics"}],
            "prerequisite_rule_sets": [{"course_id": "1", "course_name": "Basics", "rule_set": "1"}],
        }
    )

    assert course.users[0].role == "learner"
    assert course.users[0].total_time_seconds == 3600
    assert course.units[0].type == "Content"
    assert course.rules == ["All units must be completed"]
    assert course.prerequisites[0].course_name == "Basics"
    assert course.prerequisite_rule_sets[0].rule_set == "1"


def test_course_from_list_has_empty_collections():
    course = Course.model_validate({"id": "2", "code": "SAF-1", "users": None})
    assert course.users == []
    assert course.units == []
    assert course.prerequisites == []
