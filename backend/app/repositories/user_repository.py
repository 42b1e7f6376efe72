from typing import Optional

from sqlmodel import Session, select

from app.models.user import User


class UserRepository:
    def __init__(self, session: Session):
        self.session = session

    def find_by_username(self, username: str) -> Optional[User]:
        return self.session.exec(select(User).where(User.username == username)).first()

    def insert(self, username: str, password_hash: str) -> User:
        user = User(username=username, password_hash=password_hash)
        try:
            self.session.add(user)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        self.session.refresh(user)
        return user
