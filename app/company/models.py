# app/company/models.py
import uuid
from datetime import datetime

from sqlalchemy import Column, String, DateTime

from app.database import Base


class Company(Base):
    """Employer profile printed on every document. Only the first row is used."""

    __tablename__ = "company"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    nom = Column(String(150), nullable=False)
    adresse = Column(String(255), nullable=True)
    ville = Column(String(100), nullable=True)
    logo_url = Column(String(500), nullable=True)
    cnss_employeur = Column(String(50), nullable=True)
    rib = Column(String(50), nullable=True)
    matricule_fiscal = Column(String(50), nullable=True)
    banque = Column(String(100), nullable=True)
    ccb = Column(String(50), nullable=True)
    capital = Column(String(50), nullable=True)
    telephone = Column(String(30), nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<Company id={self.id} nom={self.nom}>"

    @classmethod
    def first(cls, db):
        """The singleton company row, or None before the profile is saved."""
        return db.query(cls).order_by(cls.created_at).first()
