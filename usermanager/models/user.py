"""User model"""
from sqlalchemy import Column, Integer, String, Enum
import enum
from usermanager.models.base import Base


class UserRole(str, enum.Enum):
    """User role enumeration"""
    ADMIN = "Admin"
    USER = "User"


class User(Base):
    """User model"""
    __tablename__ = "users"
    # Keep ids strictly increasing on SQLite too (no reuse after delete)
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    role = Column(
        Enum(UserRole, name="userrole", values_callable=lambda roles: [r.value for r in roles]),
        default=UserRole.USER,
        nullable=False
    )

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
