"""DashboardService aggregates over the seeded dataset."""
from datetime import date

import pytest

from gdp.infra.db.uow import UnitOfWork
from gdp.services.dashboard_service import DashboardService


@pytest.fixture
def stats(seeded):
    with UnitOfWork() as uow:
        return DashboardService(uow, today=date.today()).get_stats()


def test_task_productivity(stats):
    tasks = stats.tasks
    assert tasks.total == 4
    assert tasks.by_status == {"Done": 2, "In Progress": 1, "To Do": 1}
    assert tasks.productivity.completion_rate == 50.0
    assert tasks.productivity.high_priority_completion == 50.0
    assert tasks.productivity.low_priority_completion == 50.0


def test_user_productivity(stats, seeded):
    by_user = {u.user_id: u for u in stats.users.productivity}
    dev = by_user[seeded["dev"]]
    assert (dev.total_tasks, dev.completed_tasks) == (3, 2)
    assert dev.completion_rate == pytest.approx(66.67, abs=0.01)
    assert by_user[seeded["admin"]].completion_rate == 0.0


def test_conges_by_month_counts_only_the_reference_year(seeded):
    year = date.today().year
    with UnitOfWork() as uow:
        current = DashboardService(uow, today=date(year, 6, 1)).get_stats().conges
        previous = DashboardService(uow, today=date(year - 1, 6, 1)).get_stats().conges
    assert current.total == 4
    assert current.by_month[2] == 2 and current.by_month[4] == 1
    assert sum(previous.by_month) == 1
    assert current.by_type == {"Congé": 2, "Maladie": 1, "Autres": 1}
    assert current.by_status == {"APPROVED": 1, "PENDING": 3}


def test_serializes_with_camel_case_keys(stats):
    dumped = stats.model_dump(by_alias=True)
    assert "byMonth" in dumped["conges"]
    assert "completionRate" in dumped["projects"]["productivity"]
