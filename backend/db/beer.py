from sqlalchemy import Column, Integer, String

from .database import Base


class Beer(Base):
    """Beer model - one tracked beer product with its stock level and capacity"""
    __tablename__ = "beers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False, unique=True, index=True)
    brand = Column(String(200), nullable=False)
    # 'LAGER' | 'MALZBIER' | 'WITBIER' | 'ALE' | 'IPA' | 'STOUT' | 'WEISS' | 'PILSEN'
    type = Column(String, nullable=False)

    quantity = Column(Integer, nullable=False, default=0)
    max = Column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"Beer(id={self.id!r}, name={self.name!r}, quantity={self.quantity!r}/{self.max!r})"
