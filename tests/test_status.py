import pytest

from complaint_app.core.models import ComplaintStatus, Urgency
from complaint_app.core.status import (
    is_open_status,
    normalize_category,
    normalize_status,
    normalize_urgency,
    status_label,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Pending", ComplaintStatus.PENDING),
        ("IN_PROGRESS", ComplaintStatus.IN_PROGRESS),
        ("in progress", ComplaintStatus.IN_PROGRESS),
        ("resolved-case", ComplaintStatus.RESOLVED),
        ("Closed", ComplaintStatus.CLOSED),
        # "progress" wins over "close" by priority
        ("closed, progress pending", ComplaintStatus.IN_PROGRESS),
        ("", ComplaintStatus.PENDING),
        (None, ComplaintStatus.PENDING),
        ("escalated", ComplaintStatus.PENDING),
    ],
)
def test_normalize_status(raw, expected):
    assert normalize_status(raw) is expected


def test_normalize_status_is_total():
    for raw in (None, "", "???", 42, 3.5, ["resolved"], {"a": 1}, object()):
        assert normalize_status(raw) in set(ComplaintStatus)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("High priority", Urgency.HIGH),
        ("MEDIUM", Urgency.MEDIUM),
        ("low", Urgency.LOW),
        ("n/a", None),
        (None, None),
        ("", None),
    ],
)
def test_normalize_urgency(raw, expected):
    assert normalize_urgency(raw) is expected


def test_normalize_category():
    assert normalize_category(" Foo_Bar ") == "Foo Bar"
    assert normalize_category("Network-Issue") == "Network Issue"
    assert normalize_category("a  -_ b") == "a b"
    assert normalize_category(None) == "Uncategorized"
    assert normalize_category("   ") == "Uncategorized"
    assert normalize_category("--__") == "Uncategorized"


def test_labels_and_open_status():
    assert status_label(ComplaintStatus.IN_PROGRESS) == "In Progress"
    assert is_open_status("pending")
    assert is_open_status(ComplaintStatus.IN_PROGRESS)
    assert not is_open_status("resolved")
    assert not is_open_status(ComplaintStatus.CLOSED)
