"""Request/response schemas: camelCase wire format and field presence."""

from datetime import datetime
from uuid import uuid4

import pytest
from pydantic import ValidationError

from src.budget.models import Project
from src.budget.schemas import (
    Ack,
    Envelope,
    ExpenseCreate,
    ExpenseUpdate,
    ProjectRead,
    ProjectUpdate,
    SignupRequest,
)

pytestmark = pytest.mark.unit


def test_project_read_serializes_camel_case():
    project = Project(
        id=uuid4(),
        name="Launch",
        budget=1000,
        user_id=uuid4(),
        created_at=datetime(2024, 1, 1),
        updated_at=datetime(2024, 1, 2),
    )

    body = Envelope(data=ProjectRead.model_validate(project)).model_dump(mode="json", by_alias=True)

    assert body["ok"] is True
    assert set(body["data"]) == {"id", "name", "budget", "userId", "createdAt", "updatedAt"}
    assert body["data"]["userId"] == str(project.user_id)


def test_ack_is_bare_ok():
    assert Ack().model_dump() == {"ok": True}


def test_expense_create_accepts_both_key_styles():
    project_id = str(uuid4())
    assert ExpenseCreate.model_validate({"projectId": project_id}).project_id == project_id
    assert ExpenseCreate.model_validate({"project_id": project_id}).project_id == project_id


def test_project_update_tracks_sent_fields():
    assert ProjectUpdate.model_validate({}).model_fields_set == set()
    assert ProjectUpdate.model_validate({"budget": 0}).model_fields_set == {"budget"}
    assert ProjectUpdate.model_validate({"budget": None}).model_fields_set == {"budget"}


def test_expense_update_tracks_falsy_values():
    update = ExpenseUpdate.model_validate({"amount": 0, "description": ""})

    assert update.model_fields_set == {"amount", "description"}
    assert update.amount == 0
    assert update.description == ""


def test_text_fields_are_trimmed():
    assert ProjectUpdate.model_validate({"name": "  Trip  "}).name == "Trip"
    assert ExpenseUpdate.model_validate({"category": " Food "}).category == "Food"


def test_non_numeric_amount_rejected():
    with pytest.raises(ValidationError):
        ExpenseUpdate.model_validate({"amount": "ten"})


class TestSignupPassword:
    def test_strong_password_accepted(self):
        request = SignupRequest(
            email="a@example.com", password="correct-horse-battery-staple-42", name="A"
        )
        assert request.name == "A"

    @pytest.mark.parametrize("password", ["password", "12345678", "qwertyuiop"])
    def test_weak_password_rejected(self, password):
        with pytest.raises(ValidationError, match="Weak password|too weak"):
            SignupRequest(email="a@example.com", password=password, name="A")

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            SignupRequest(email="a@example.com", password="correct-horse-battery-staple-42", name="  ")
