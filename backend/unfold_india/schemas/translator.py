from pydantic import BaseModel


class Language(BaseModel):
    code: str
    name: str
    native: str


class TranslateRequest(BaseModel):
    text: str
    language: str = "hindi"


class TranslateResponse(BaseModel):
    text: str
    language: str
    translation: str
