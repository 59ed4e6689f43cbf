from __future__ import annotations

from decimal import Decimal

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.types import TypeDecorator

from jobly.database import Base


class DecimalString(TypeDecorator):
    """Exact decimal surfaced as a plain string ("0.1", "0", "0.0005").

    NUMERIC without a fixed scale where the database has an exact decimal
    type; on SQLite, whose NUMERIC affinity falls back to REAL, the
    normalized text is stored instead.
    """

    impl = Numeric
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String(32))
        return dialect.type_descriptor(Numeric(asdecimal=True))

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        number = Decimal(str(value))
        if dialect.name == "sqlite":
            return _decimal_text(number)
        return number

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return _decimal_text(Decimal(str(value)))


def _decimal_text(number: Decimal) -> str:
    return format(number.normalize(), "f")


class Job(Base):
    __tablename__ = "jobs"
    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_jobs_salary_non_negative"),
        CheckConstraint("CAST(equity AS NUMERIC) <= 1", name="ck_jobs_equity_max_one"),
    )

    id = Column(Integer, primary_key=True, index=True)
    title = Column(Text, nullable=False)
    salary = Column(Integer)
    equity = Column(DecimalString())
    company_handle = Column(
        String(25),
        ForeignKey("companies.handle", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
