# app/salary/models.py
import uuid
from datetime import datetime

from sqlalchemy import Column, Integer, String, Date, DateTime, Numeric, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from app.database import Base


class Salary(Base):
    __tablename__ = "salaries"
    __table_args__ = (
        UniqueConstraint("employee_id", "year", "month", name="uq_salary_employee_month"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    employee_id = Column(String(36), ForeignKey("employees.id"), nullable=False, index=True)
    year = Column(Integer, nullable=False)
    month = Column(Integer, nullable=False)

    # amounts in TND, 3 decimals (millimes)
    salaire = Column(Numeric(12, 3), nullable=False)
    prime = Column(Numeric(12, 3), nullable=True, default=0)
    absence = Column(Numeric(6, 2), nullable=True, default=0)
    avance = Column(Numeric(12, 3), nullable=True, default=0)
    date_avance = Column(Date, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    employee = relationship("Employee", back_populates="salaries", lazy="joined")

    def __repr__(self):
        return f"<Salary id={self.id} employee_id={self.employee_id} {self.year}-{self.month:02d}>"
