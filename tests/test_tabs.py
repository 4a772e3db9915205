import pytest

from devops_console.core.tabs import DashboardTab, TabSelector


def test_starts_on_overview():
    assert TabSelector().active is DashboardTab.OVERVIEW


def test_select_jumps_directly_to_any_section():
    selector = TabSelector()
    assert selector.select("Audit") is True
    assert selector.active is DashboardTab.AUDIT
    assert selector.select(DashboardTab.COST) is True
    assert selector.active is DashboardTab.COST


def test_selecting_active_section_is_noop():
    selector = TabSelector()
    assert selector.select("Overview") is False
    assert selector.active is DashboardTab.OVERVIEW


def test_unknown_section_rejected_and_state_kept():
    selector = TabSelector(DashboardTab.SECURITY)
    with pytest.raises(ValueError):
        selector.select("Billing")
    assert selector.active is DashboardTab.SECURITY


def test_labels_in_console_order():
    assert DashboardTab.labels() == [
        "Overview",
        "Incidents",
        "Monitoring",
        "Security",
        "Cost",
        "Environments",
        "Productivity",
        "Audit",
    ]
