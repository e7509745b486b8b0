"""
Dashboard Router - Role-restricted landing endpoints for doctors and patients.
"""
from fastapi import APIRouter, Depends

from ..auth.dependencies import require_doctor, require_patient
from ..auth.schemas import TokenClaims
from .schemas import DashboardResponse

router = APIRouter()

@router.get("/doctors/dashboard", response_model=DashboardResponse, tags=["Doctors"], summary="Doctor Dashboard")
def doctor_dashboard(claims: TokenClaims = Depends(require_doctor)):
    """
    Dashboard reserved for doctors.
    """
    return DashboardResponse(message="Welcome to the doctor dashboard", user=claims)

@router.get("/patients/dashboard", response_model=DashboardResponse, tags=["Patients"], summary="Patient Dashboard")
def patient_dashboard(claims: TokenClaims = Depends(require_patient)):
    """
    Dashboard reserved for patients.
    """
    return DashboardResponse(message="Welcome to the patient dashboard", user=claims)
