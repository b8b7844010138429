from fastapi import APIRouter, Depends

from unfold_india.api import deps
from unfold_india.schemas.translator import Language, TranslateRequest, TranslateResponse
from unfold_india.services.translator import Translator

router = APIRouter()


@router.get("/languages", response_model=list[Language])
def list_languages(
    translator: Translator = Depends(deps.get_translator),
) -> list[Language]:
    return translator.languages()


@router.post("/translate", response_model=TranslateResponse)
async def translate_text(
    payload: TranslateRequest,
    translator: Translator = Depends(deps.get_translator),
) -> TranslateResponse:
    return await translator.translate(payload.text, payload.language)
