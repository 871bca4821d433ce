"""SQLAlchemy models for the Registry."""

from __future__ import annotations

from datetime import date  # noqa: TC003 - used at runtime for SQLAlchemy
from typing import Any

from sqlalchemy import (
    Column,
    Date,
    Float,
    ForeignKey,
    Integer,
    String,
    Table,
)
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    mapped_column,
    relationship,
)


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


# Course <-> Instructor pairs are stored once, here.
teaches = Table(
    "teaches",
    Base.metadata,
    Column("instructor_id", Integer, ForeignKey("instructors.id"), primary_key=True),
    Column("course_code", String(50), ForeignKey("courses.code"), primary_key=True),
)


class Faculty(Base):
    """Faculty model - top of the ownership tree."""

    __tablename__ = "faculties"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    # Relationships
    departments: Mapped[list[Department]] = relationship(
        "Department", back_populates="faculty", cascade="all, delete-orphan"
    )
    levels: Mapped[list[Level]] = relationship(
        "Level", back_populates="faculty", cascade="all, delete-orphan"
    )

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.name = name

    def __repr__(self) -> str:
        return f"<Faculty(id={self.id!r}, name={self.name!r})>"


class Department(Base):
    """Department model - owned by a Faculty, owns Students and Courses."""

    __tablename__ = "departments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    faculty_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("faculties.id", ondelete="CASCADE"), nullable=False
    )

    # Relationships
    faculty: Mapped[Faculty] = relationship("Faculty", back_populates="departments")
    students: Mapped[list[Student]] = relationship("Student", back_populates="department")
    courses: Mapped[list[Course]] = relationship("Course", back_populates="department")
    instructors: Mapped[list[Instructor]] = relationship("Instructor", back_populates="department")

    def __init__(self, name: str, faculty: Faculty | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.name = name
        if faculty is not None:
            self.faculty = faculty

    def __repr__(self) -> str:
        return f"<Department(id={self.id!r}, name={self.name!r}, faculty_id={self.faculty_id!r})>"


class Level(Base):
    """Level model - academic-year grouping owned by a Faculty."""

    __tablename__ = "levels"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    faculty_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("faculties.id", ondelete="CASCADE"), nullable=False
    )

    # Relationships
    faculty: Mapped[Faculty] = relationship("Faculty", back_populates="levels")
    students: Mapped[list[Student]] = relationship("Student", back_populates="level")
    courses: Mapped[list[Course]] = relationship("Course", back_populates="level")

    def __init__(self, name: str, faculty: Faculty | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.name = name
        if faculty is not None:
            self.faculty = faculty

    def __repr__(self) -> str:
        return f"<Level(id={self.id!r}, name={self.name!r}, faculty_id={self.faculty_id!r})>"


class Course(Base):
    """Course model - keyed by its caller-supplied code."""

    __tablename__ = "courses"

    code: Mapped[str] = mapped_column(String(50), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    credits: Mapped[int] = mapped_column(Integer, nullable=False)
    level_id: Mapped[int] = mapped_column(Integer, ForeignKey("levels.id"), nullable=False)
    department_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("departments.id"), nullable=False
    )

    # Relationships
    level: Mapped[Level] = relationship("Level", back_populates="courses")
    department: Mapped[Department] = relationship("Department", back_populates="courses")
    enrollments: Mapped[list[Enrollment]] = relationship("Enrollment", back_populates="course")
    instructors: Mapped[list[Instructor]] = relationship(
        "Instructor", secondary=teaches, back_populates="courses"
    )

    def __init__(self, code: str, name: str, credits: int, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.code = code
        self.name = name
        self.credits = credits

    def __repr__(self) -> str:
        return f"<Course(code={self.code!r}, name={self.name!r}, credits={self.credits!r})>"


class Student(Base):
    """Student model - belongs to a Level, optionally to a Department."""

    __tablename__ = "students"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    phone_number: Mapped[str] = mapped_column(String(50), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    gender: Mapped[str | None] = mapped_column(String(20), nullable=True)
    level_id: Mapped[int] = mapped_column(Integer, ForeignKey("levels.id"), nullable=False)
    department_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("departments.id", ondelete="SET NULL"), nullable=True
    )
    user_id: Mapped[int | None] = mapped_column(Integer, nullable=True, unique=True)

    # Relationships
    level: Mapped[Level] = relationship("Level", back_populates="students")
    department: Mapped[Department | None] = relationship("Department", back_populates="students")
    enrollments: Mapped[list[Enrollment]] = relationship("Enrollment", back_populates="student")

    def __init__(
        self,
        first_name: str,
        last_name: str,
        phone_number: str,
        date_of_birth: date,
        gender: str | None = None,
        user_id: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.first_name = first_name
        self.last_name = last_name
        self.phone_number = phone_number
        self.date_of_birth = date_of_birth
        self.gender = gender
        self.user_id = user_id

    def __repr__(self) -> str:
        return (
            f"<Student(id={self.id!r}, first_name={self.first_name!r}, "
            f"last_name={self.last_name!r})>"
        )


class Instructor(Base):
    """Instructor model - belongs to a Department, teaches Courses."""

    __tablename__ = "instructors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    phone_number: Mapped[str] = mapped_column(String(50), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    gender: Mapped[str | None] = mapped_column(String(20), nullable=True)
    department_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("departments.id"), nullable=False
    )
    user_id: Mapped[int | None] = mapped_column(Integer, nullable=True, unique=True)

    # Relationships
    department: Mapped[Department] = relationship("Department", back_populates="instructors")
    courses: Mapped[list[Course]] = relationship(
        "Course", secondary=teaches, back_populates="instructors"
    )

    def __init__(
        self,
        first_name: str,
        last_name: str,
        phone_number: str,
        date_of_birth: date,
        gender: str | None = None,
        user_id: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.first_name = first_name
        self.last_name = last_name
        self.phone_number = phone_number
        self.date_of_birth = date_of_birth
        self.gender = gender
        self.user_id = user_id

    def __repr__(self) -> str:
        return (
            f"<Instructor(id={self.id!r}, first_name={self.first_name!r}, "
            f"last_name={self.last_name!r})>"
        )


class Enrollment(Base):
    """Enrollment model - a Student taking a Course, keyed by the pair."""

    __tablename__ = "enrollments"

    student_id: Mapped[int] = mapped_column(Integer, ForeignKey("students.id"), primary_key=True)
    course_code: Mapped[str] = mapped_column(
        String(50), ForeignKey("courses.code"), primary_key=True
    )
    grade: Mapped[float] = mapped_column(Float, nullable=False)

    # Relationships
    student: Mapped[Student] = relationship("Student", back_populates="enrollments")
    course: Mapped[Course] = relationship("Course", back_populates="enrollments")

    def __init__(self, grade: float | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        if grade is not None:
            self.grade = grade

    def __repr__(self) -> str:
        return (
            f"<Enrollment(student_id={self.student_id!r}, course_code={self.course_code!r}, "
            f"grade={self.grade!r})>"
        )
