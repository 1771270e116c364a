from sqlalchemy import or_, and_
from sqlalchemy.orm import Session
from app.models.event import Event
from typing import List, Optional

class EventRepository:
    def get_all(self, db: Session) -> List[Event]:
        return db.query(Event).order_by(Event.event_date.asc()).all()

    def get_visible_to(self, db: Session, user_id: int) -> List[Event]:
        return (
            db.query(Event)
            .filter(or_(
                Event.created_by == user_id,
                and_(Event.approved == True, Event.visibility == "shared"),  # noqa: E712
            ))
            .order_by(Event.event_date.asc())
            .all()
        )

    def get_by_id(self, db: Session, event_id: int) -> Optional[Event]:
        return db.query(Event).filter(Event.id == event_id).first()

    def create(self, db: Session, event: Event) -> Event:
        db.add(event)
        db.commit()
        db.refresh(event)
        return event

    def update(self, db: Session, event: Event) -> Event:
        db.commit()
        db.refresh(event)
        return event

    def delete(self, db: Session, event: Event) -> None:
        db.delete(event)
        db.commit()
