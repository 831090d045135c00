from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

# --- Languages ---
class LanguageBase(BaseModel):
    name: str
    code: str

class LanguageInDB(LanguageBase):
    id: int
    model_config = ConfigDict(from_attributes=True)

# --- Translation ---
class TranslationRequest(BaseModel):
    text: str
    target_lang: str = Field(alias="targetLang") # Например, 'ES', 'EN-US'

    @field_validator("text", "target_lang")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("must not be empty")
        return v

class TranslationResponse(BaseModel):
    translation: str

class ErrorResponse(BaseModel):
    message: str

# --- DeepL wire format ---
class DeepLRequest(BaseModel):
    text: List[str]
    target_lang: str

class DeepLTranslation(BaseModel):
    text: str
    detected_source_language: Optional[str] = None

class DeepLResponse(BaseModel):
    translations: List[DeepLTranslation] = Field(min_length=1)
