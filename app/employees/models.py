import uuid
from datetime import datetime

from sqlalchemy import Column, Integer, String, Date, DateTime, Enum
from sqlalchemy.orm import relationship

from app.database import Base

CONTRACT_TYPES = ("CDI", "CDD", "STAGE", "FREELANCE", "INTERIM", "SIVP", "VERBAL")
ID_TYPES = ("CIN", "Passeport")


def _uuid():
    return str(uuid.uuid4())


class Employee(Base):
    __tablename__ = "employees"

    id = Column(String(36), primary_key=True, default=_uuid)
    code = Column(String(20), nullable=False, unique=True, index=True)
    nom = Column(String(100), nullable=False)
    prenom = Column(String(100), nullable=False)
    cin = Column(String(50), nullable=False, unique=True)
    type_contrat = Column(Enum(*CONTRACT_TYPES, name="type_contrat"), nullable=False)
    service = Column(String(100), nullable=True)
    poste = Column(String(100), nullable=False)
    date_embauche = Column(Date, nullable=False)
    nationalite = Column(String(50), nullable=True, default="tunisienne")

    # identity document metadata (printed on certificates)
    id_type = Column(Enum(*ID_TYPES, name="id_type"), nullable=True, default="CIN")
    id_date = Column(Date, nullable=True)
    id_place = Column(String(100), nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # no ORM cascade: removing an employee leaves its salary rows alone
    salaries = relationship("Salary", back_populates="employee", passive_deletes="all")

    def __repr__(self):
        return f"<Employee id={self.id} code={self.code} nom={self.nom}>"


class Counter(Base):
    __tablename__ = "counters"

    id = Column(Integer, primary_key=True, index=True)
    entity = Column(String(50), nullable=False, unique=True)
    last_value = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<Counter entity={self.entity} last_value={self.last_value}>"
