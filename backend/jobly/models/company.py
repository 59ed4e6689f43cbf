from __future__ import annotations

from sqlalchemy import Column, Integer, String, Text

from jobly.database import Base


class Company(Base):
    __tablename__ = "companies"

    handle = Column(String(25), primary_key=True)
    name = Column(Text, unique=True, nullable=False)
    num_employees = Column(Integer)
    description = Column(Text, nullable=False)
    logo_url = Column(Text)
