from sqlalchemy import Column, String, Integer
from .database import Base


class Language(Base):
    __tablename__ = "languages"
    id = Column(Integer, primary_key=True)
    name = Column(String(100), unique=True, nullable=False)
    # Код целевого языка DeepL, например 'ES' или 'EN-US'
    code = Column(String(10), unique=True, nullable=False)
