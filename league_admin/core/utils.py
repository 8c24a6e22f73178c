from sqlalchemy import Column, String, Integer, func
from sqlalchemy.orm import Session
from league_admin.core.database import Base


class IdSequence(Base):
    __tablename__ = "id_sequences"

    prefix = Column(String, primary_key=True)
    last_value = Column(Integer, nullable=False, default=0)


def generate_custom_id(db: Session, model, prefix: str, id_field: str):
    """
    Generate a human-readable unique ID with a prefix from a per-prefix counter.

    The counter only moves forward, so an ID freed by a delete is never handed out again.

    :param db: SQLAlchemy session
    :param model: SQLAlchemy model class
    :param prefix: String prefix for the ID (e.g., "L" for league, "T" for team)
    :param id_field: Field name storing the custom ID
    :return: Generated custom ID (e.g., "L1", "T9999", "T10000")
    """
    sequence = db.get(IdSequence, prefix)
    if sequence is None:
        sequence = IdSequence(prefix=prefix, last_value=0)
        db.add(sequence)

    new_id = sequence.last_value + 1
    new_id_str = f"{prefix}{new_id}"

    # Rows inserted with explicit IDs can still be ahead of the counter
    while db.query(model).filter(getattr(model, id_field) == new_id_str).first():
        new_id += 1
        new_id_str = f"{prefix}{new_id}"

    sequence.last_value = new_id
    db.flush()
    return new_id_str


def store_order(id_column):
    """Order clauses that sort prefixed IDs by their counter ("T9" before "T10")."""
    return (func.length(id_column), id_column)
