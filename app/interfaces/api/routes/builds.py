"""Read access to the notification emails recorded for builds."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.domain.entities import BuildEmail
from app.infrastructure.database import get_db
from app.infrastructure.repositories import BuildEmailRepository
from app.interfaces.api.schemas import BuildEmailRead

router = APIRouter(prefix="/builds", tags=["builds"])


def _to_read_model(build_email: BuildEmail) -> BuildEmailRead:
    return BuildEmailRead.model_validate(build_email)


@router.get("/{build_id}/emails", response_model=list[BuildEmailRead])
def list_build_emails(build_id: int, db: Session = Depends(get_db)) -> list[BuildEmailRead]:
    """Return every notification email sent for the build."""

    collection = BuildEmailRepository(db).list_sent_for_build(build_id)
    return [_to_read_model(email) for email in collection.all()]


@router.get("/{build_id}/emails/{user_id}", response_model=BuildEmailRead)
def get_build_email(
    build_id: int,
    user_id: int,
    category: int = Query(..., description="Notification category to look up"),
    db: Session = Depends(get_db),
) -> BuildEmailRead:
    """Tell whether the user was already notified about the build."""

    build_email = BuildEmailRepository(db).get_for_user(user_id, build_id, category)
    return _to_read_model(build_email)
