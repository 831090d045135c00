from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from .. import models, schemas, database

router = APIRouter(prefix="/api/languages", tags=["Languages"])

# Egyptian не отдельный язык в DeepL, используем AR.
# Malay в DeepL нет, ближайший вариант - ID (Indonesian).
DEFAULT_LANGUAGES = [
    ("Arabic", "AR"),
    ("Spanish", "ES"),
    ("English", "EN-US"),
    ("Malay", "ID"),
    ("Chinese", "ZH"),
]


def seed_languages(db: Session) -> bool:
    """Наполняет таблицу языков, если она пуста. Возвращает True, если что-то добавлено."""
    if db.query(models.Language).count() > 0:
        return False
    db.add_all([models.Language(name=name, code=code) for name, code in DEFAULT_LANGUAGES])
    db.commit()
    return True


@router.get("", response_model=List[schemas.LanguageInDB])
async def get_all_languages(db: Session = Depends(database.get_db)):
    # Порядок вставки = порядок кнопок в интерфейсе
    return db.query(models.Language).order_by(models.Language.id).all()
