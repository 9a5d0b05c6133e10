import pytest

from formrelay.core.errors import ContactValidationError
from formrelay.core.escaping import escape_html
from formrelay.core.validation import is_valid_email, validate_submission
from formrelay.models.contact import ContactSubmission


def submission(**overrides):
    fields = {"name": "Jane", "email": "jane@example.com", "message": "Hello"}
    fields.update(overrides)
    return ContactSubmission(**fields)


@pytest.mark.parametrize("email", ["jane@example.com", "a@b.c", "first.last+tag@sub.domain.org"])
def test_email_shape_accepted(email):
    assert is_valid_email(email)


@pytest.mark.parametrize("email", ["foo", "a@b", "@b.com", "a@.", "a@b.com\n", " a@b.com", "a@b@c.com"])
def test_email_shape_rejected(email):
    assert not is_valid_email(email)


@pytest.mark.parametrize(
    "overrides,reason",
    [
        ({"name": None}, ContactValidationError.MISSING_FIELD),
        ({"email": ""}, ContactValidationError.MISSING_FIELD),
        ({"email": "nope", "message": None}, ContactValidationError.MISSING_FIELD),
        ({"email": "nope", "name": "a" * 101}, ContactValidationError.BAD_EMAIL_FORMAT),
        ({"name": "a" * 101, "message": "m" * 5001}, ContactValidationError.NAME_TOO_LONG),
        ({"message": "m" * 5001}, ContactValidationError.MESSAGE_TOO_LONG),
    ],
)
def test_first_broken_rule_wins(overrides, reason):
    with pytest.raises(ContactValidationError) as exc_info:
        validate_submission(submission(**overrides))
    assert exc_info.value.reason == reason
    assert exc_info.value.status_code == 400


def test_limits_are_inclusive():
    validate_submission(submission(name="a" * 100, message="m" * 5000))


def test_escape_html_replaces_all_significant_characters():
    assert escape_html("""& < > " '""") == "&amp; &lt; &gt; &quot; &#x27;"


def test_escape_html_script_tag():
    assert escape_html('<script>"x"</script>') == "&lt;script&gt;&quot;x&quot;&lt;/script&gt;"


def test_escape_html_escapes_existing_entities_once():
    assert escape_html("&lt;") == "&amp;lt;"
    assert escape_html("plain text") == "plain text"
