"""
Planet Model

The single persisted entity. Attribute names are English; column
names keep the on-disk Portuguese schema.
"""
from sqlalchemy import Column, Integer, Text, REAL

from planetas.database import Base


class Planet(Base):
    """
    Planet record

    distance is measured from the Sun in AU, size in km.
    """
    __tablename__ = "planetas"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    name = Column("nome", Text, nullable=False)
    distance = Column("distancia", REAL, nullable=False)
    size = Column("tamanho", REAL, nullable=False)
    nickname = Column("apelido", Text)

    def __repr__(self):
        return f"<Planet(id={self.id}, name={self.name})>"
