import logging
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from sitecms.core.database import get_db
from sitecms.core.deps import parse_id
from sitecms.core.errors import NotFound
from sitecms.crud import team_member as team_crud
from sitecms.schemas.common import DeleteResponse
from sitecms.schemas.team_member import TeamMemberCreateRequest, TeamMemberResponse, TeamMemberUpdateRequest

router = APIRouter(prefix="/team", tags=["Team"])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[TeamMemberResponse])
def list_team_members(db: Session = Depends(get_db)):
    """List team members in display order."""
    return team_crud.get_multi(db)


@router.post("", status_code=201, response_model=TeamMemberResponse)
def create_team_member(request: TeamMemberCreateRequest, db: Session = Depends(get_db)):
    member = team_crud.create(db, request)
    logger.info(f"Created team member {member.id}: {member.name}")
    return member


@router.put("/{member_id}", response_model=TeamMemberResponse)
def update_team_member(member_id: str, request: TeamMemberUpdateRequest, db: Session = Depends(get_db)):
    member = team_crud.update(db, parse_id(member_id, "team member"), request.changes())

    if not member:
        raise NotFound("Team member not found")

    return member


@router.delete("/{member_id}", response_model=DeleteResponse)
def delete_team_member(member_id: str, db: Session = Depends(get_db)):
    uid = parse_id(member_id, "team member")

    if not team_crud.delete(db, uid):
        raise NotFound("Team member not found")

    logger.info(f"Deleted team member {uid}")
    return DeleteResponse(message="Team member deleted successfully", id=uid)
