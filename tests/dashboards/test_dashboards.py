"""
Tests for the role-restricted dashboards.
"""
import pytest
from datetime import timedelta

from health_diary.auth.dependencies import require_roles
from health_diary.core.security import create_access_token


def _bearer(token):
    return {"Authorization": f"Bearer {token}"}


def test_doctor_dashboard_access(client, doctor, patient, login):
    doctor_token = login(doctor.email)["accessToken"]
    patient_token = login(patient.email)["accessToken"]

    assert client.get("/doctors/dashboard").status_code == 401
    assert client.get("/doctors/dashboard", headers=_bearer(patient_token)).status_code == 403

    response = client.get("/doctors/dashboard", headers=_bearer(doctor_token))
    assert response.status_code == 200
    assert response.json()["user"] == {"id": doctor.id, "email": doctor.email, "type": "doctor"}


def test_patient_dashboard_access(client, doctor, patient, login):
    doctor_token = login(doctor.email)["accessToken"]
    patient_token = login(patient.email)["accessToken"]

    forbidden = client.get("/patients/dashboard", headers=_bearer(doctor_token))
    assert forbidden.status_code == 403
    assert "message" in forbidden.json()

    response = client.get("/patients/dashboard", headers=_bearer(patient_token))
    assert response.status_code == 200
    assert response.json()["user"]["type"] == "patient"


def test_expired_access_token_rejected(client):
    token = create_access_token(
        {"id": 1, "email": "a@example.com", "type": "doctor"},
        expires_delta=timedelta(seconds=-1)
    )
    assert client.get("/doctors/dashboard", headers=_bearer(token)).status_code == 401


def test_unknown_role_claim_rejected(client):
    token = create_access_token({"id": 1, "email": "a@example.com", "type": "admin"})
    assert client.get("/doctors/dashboard", headers=_bearer(token)).status_code == 401


def test_require_roles_only_accepts_user_roles():
    with pytest.raises(TypeError):
        require_roles("doctor")
