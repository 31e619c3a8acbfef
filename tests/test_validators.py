from datetime import datetime

import pytest

from locallibrary.utils.validators import (
    CREATE_MESSAGES,
    UPDATE_MESSAGES,
    parse_iso8601,
    sanitize,
    validate_bookinstance_form,
)


def test_valid_form_has_no_errors():
    values, errors = validate_bookinstance_form({
        "book": "  b1  ",
        "imprint": " Gollancz, 2011. ",
        "status": "Available",
        "due_back": "2024-06-01",
    })
    assert errors == []
    assert values == {
        "book": "b1",
        "imprint": "Gollancz, 2011.",
        "status": "Available",
        "due_back": datetime(2024, 6, 1),
    }


@pytest.mark.parametrize("book,imprint", [("", ""), ("   ", "\t"), (None, None)])
def test_missing_book_and_imprint_reports_both(book, imprint):
    form = {"status": "Available"}
    if book is not None:
        form["book"] = book
        form["imprint"] = imprint

    _values, errors = validate_bookinstance_form(form)
    assert [e.field for e in errors] == ["book", "imprint"]
    assert [e.message for e in errors] == [CREATE_MESSAGES["book"], CREATE_MESSAGES["imprint"]]


def test_update_messages_are_used_when_given():
    _values, errors = validate_bookinstance_form({"book": "b1", "imprint": " "}, UPDATE_MESSAGES)
    assert [e.message for e in errors] == ["Imprint must not be empty."]


def test_strings_are_html_escaped():
    values, errors = validate_bookinstance_form({
        "book": "b1",
        "imprint": "<b>O'Reilly & Sons</b>",
        "status": "<Loaned>",
    })
    assert errors == []
    assert values["imprint"] == "&lt;b&gt;O&#39;Reilly &amp; Sons&lt;&#x2F;b&gt;"
    # status is escaped but not checked against the enumeration here
    assert values["status"] == "&lt;Loaned&gt;"


def test_empty_status_and_due_back_are_left_unset():
    values, errors = validate_bookinstance_form({"book": "b1", "imprint": "x", "status": "", "due_back": ""})
    assert errors == []
    assert values["status"] is None
    assert values["due_back"] is None


def test_invalid_due_back_is_reported():
    _values, errors = validate_bookinstance_form({"book": "b1", "imprint": "x", "due_back": "next tuesday"})
    assert len(errors) == 1
    assert errors[0].field == "due_back"
    assert errors[0].message == "Invalid date"
    assert errors[0].value == "next tuesday"


def test_all_rules_run_before_reporting():
    _values, errors = validate_bookinstance_form({"book": "", "imprint": "", "due_back": "2024-13-45"})
    assert [e.field for e in errors] == ["book", "imprint", "due_back"]


def test_parse_iso8601_variants():
    assert parse_iso8601("2024-06-01") == datetime(2024, 6, 1)
    assert parse_iso8601("2024-06-01T10:30:00") == datetime(2024, 6, 1, 10, 30)
    assert parse_iso8601("2024-06-01T10:30:00Z") == datetime(2024, 6, 1, 10, 30)
    assert parse_iso8601("2024-06-01T12:30:00+02:00") == datetime(2024, 6, 1, 10, 30)


def test_parse_iso8601_rejects_garbage():
    with pytest.raises(ValueError):
        parse_iso8601("01/06/2024")


def test_sanitize_plain_text_unchanged():
    assert sanitize("Gollancz, 2011.") == "Gollancz, 2011."


def test_due_back_beyond_utc_range_is_reported():
    values, errors = validate_bookinstance_form({
        "book": "b1",
        "imprint": "x",
        "due_back": "9999-12-31T23:00:00-05:00",
    })
    assert values["due_back"] is None
    assert [(e.field, e.message) for e in errors] == [("due_back", "Invalid date")]


def test_sanitize_escapes_slashes_and_backtick():
    assert sanitize("a/b\\c`d") == "a&#x2F;b&#x5C;c&#96;d"
    assert sanitize("</script>") == "&lt;&#x2F;script&gt;"
