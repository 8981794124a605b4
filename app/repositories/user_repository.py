from typing import Any, Optional

from sqlalchemy.orm import Session

from app.models import User


class UserRepository:
    @staticmethod
    def get_by_email(db: Session, email: str) -> Optional[Any]:
        return (
            db.query(User.id, User.name, User.email, User.password)
            .filter(User.email == email)
            .first()
        )
