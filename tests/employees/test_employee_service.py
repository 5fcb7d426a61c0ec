from __future__ import annotations

import pytest

from src.dayflow.dayflow.core.exceptions import ValidationError
from src.dayflow.dayflow.employees.service import EmployeeService


class FakeEmployeesRepo:
    def __init__(self, *, update_result: int = 1):
        self.created = None
        self.updated = None
        self._update_result = update_result

    def create(self, **kwargs):
        self.created = kwargs
        return 7

    def update(self, **kwargs):
        self.updated = kwargs
        return self._update_result


def test_create_keeps_strings_as_sent_and_hashes():
    repo = FakeEmployeesRepo()
    svc = EmployeeService(repo)

    new_id = svc.create_employee(
        name="  Ana  ",
        email="ana@dayflow.local",
        password="hunter22",
        position="",
        department=None,
    )

    assert new_id == 7
    assert repo.created["name"] == "  Ana  "
    assert repo.created["position"] == ""
    assert repo.created["password_hash"] != "hunter22"
    assert repo.created["date_of_joining"] is None


@pytest.mark.parametrize(
    "kwargs, field",
    [
        ({"name": None, "email": "a@b.co", "password": "123456"}, "name"),
        ({"name": "A", "email": "a@b", "password": "123456"}, "email"),
        ({"name": "A", "email": "a b@c.de", "password": "123456"}, "email"),
        ({"name": "A", "email": "a@b.co", "password": None}, "password"),
        ({"name": "A", "email": "a@b.co", "password": "123456", "position": 3}, "position"),
    ],
)
def test_create_rejects_invalid_fields(kwargs, field):
    repo = FakeEmployeesRepo()

    with pytest.raises(ValidationError) as exc:
        EmployeeService(repo).create_employee(**kwargs)

    assert field in str(exc.value)
    assert repo.created is None


def test_update_reports_zero_rows_without_raising():
    repo = FakeEmployeesRepo(update_result=0)

    affected = EmployeeService(repo).update_employee(404, name="X", email="x@y.zz")

    assert affected == 0
    assert repo.updated["employee_id"] == 404
    assert repo.updated["position"] is None
