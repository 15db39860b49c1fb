# app/auth/models.py
from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from werkzeug.security import check_password_hash

from app.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(150), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)  # werkzeug hash, never plain text

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    roles = relationship("UserRole", back_populates="user", cascade="all, delete-orphan", lazy="selectin")

    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password, password or "")

    @property
    def role_names(self):
        return [r.role for r in self.roles]

    def __repr__(self):
        return f"<User id={self.id} email={self.email}>"


class UserRole(Base):
    __tablename__ = "user_roles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    role = Column(String(30), nullable=False)  # admin / rh / ...

    user = relationship("User", back_populates="roles")

    def __repr__(self):
        return f"<UserRole user_id={self.user_id} role={self.role}>"
