"""
CRUD operations for TeamMember model.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session
from sitecms.models.team_member import TeamMember
from sitecms.schemas.team_member import TeamMemberCreateRequest


def create(db: Session, member_data: TeamMemberCreateRequest) -> TeamMember:
    member = TeamMember(**member_data.model_dump())

    db.add(member)
    db.commit()
    db.refresh(member)

    return member


def get_by_id(db: Session, member_id: UUID) -> Optional[TeamMember]:
    return db.query(TeamMember).filter(TeamMember.id == member_id).first()


def get_multi(db: Session) -> List[TeamMember]:
    """Display order first, newest first among equal positions."""
    return db.query(TeamMember).order_by(TeamMember.order.asc(), TeamMember.created_at.desc()).all()


def update(db: Session, member_id: UUID, changes: dict) -> Optional[TeamMember]:
    member = get_by_id(db, member_id)
    if not member:
        return None

    for field, value in changes.items():
        setattr(member, field, value)

    db.commit()
    db.refresh(member)

    return member


def delete(db: Session, member_id: UUID) -> bool:
    member = get_by_id(db, member_id)
    if not member:
        return False

    db.delete(member)
    db.commit()

    return True
