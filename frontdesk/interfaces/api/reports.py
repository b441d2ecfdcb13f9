"""Report API - CSV downloads of check-in activity."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from frontdesk.application.services.report_service import generate_report
from frontdesk.domain.repositories.guest_repository import GuestStayRepository
from frontdesk.domain.schemas.auth import SessionClaims
from frontdesk.interfaces.api.deps import get_current_user
from frontdesk.interfaces.deps import get_guest_repository

router = APIRouter(prefix="/api/reports", tags=["Reports"])


@router.get("/download")
def download_report(
    period: Optional[str] = Query(None, description="daily, weekly, monthly or yearly"),
    guests: GuestStayRepository = Depends(get_guest_repository),
    user: SessionClaims = Depends(get_current_user),
):
    report = generate_report(guests, period)
    return Response(
        content=report.content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{report.filename}"'},
    )
