"""User and student model definitions."""

from sqlalchemy import Column, ForeignKey, Integer, String
from campus_wellness.database import Base


class User(Base):
    """Represents an application user."""
    __tablename__ = "User"

    user_id = Column(Integer, primary_key=True)
    name = Column(String(100))
    email = Column(String(100), unique=True)
    password = Column(String(255))
    phone = Column(String(30))
    role = Column(String(30))  # student/professional/admin


class Student(Base):
    """Student profile; `std_id` is the identifier every wellness record uses."""
    __tablename__ = "Student"

    user_id = Column(Integer, ForeignKey("User.user_id"), primary_key=True)
    std_id = Column(Integer, unique=True)
    department = Column(String(100))
    semester = Column(String(30))
