from unfold_india.core.exceptions import ValidationError
from unfold_india.schemas.translator import Language, TranslateResponse
from unfold_india.services.latency import deferred

LANGUAGES = [
    Language(code="hindi", name="Hindi", native="हिन्दी"),
    Language(code="tamil", name="Tamil", native="தமிழ்"),
    Language(code="bengali", name="Bengali", native="বাংলা"),
    Language(code="telugu", name="Telugu", native="తెలుగు"),
    Language(code="marathi", name="Marathi", native="मराठी"),
    Language(code="gujarati", name="Gujarati", native="ગુજરાતી"),
]

TRANSLATIONS = {
    "hindi": "नमस्ते! आपका भारत में स्वागत है। यहाँ की संस्कृति और व्यंजन अद्भुत हैं।",
    "tamil": "வணக்கம்! இந்தியாவிற்கு உங்களை வரவேற்கிறோம். இங்கே கலாச்சாரம் மற்றும் உணவு அற்புதமானது.",
    "bengali": "নমস্কার! ভারতে আপনাকে স্বাগতম। এখানকার সংস্কৃতি এবং খাবার অসাধারণ।",
    "telugu": "నమస్కారం! భారతదేశానికి మిమ్మల్ని స్వాగతం. ఇక్కడ సంస్కృతి మరియు వంటకాలు అద్భుతమైనవి.",
    "marathi": "नमस्कार! भारतात तुमचे स्वागत आहे. इथली संस्कृती आणि पदार्थ उत्कृष्ट आहेत.",
    "gujarati": "નમસ્તે! ભારતમાં તમારું સ્વાગત છે. અહીંની સંસ્કૃતિ અને ખોરાક અદ્ભુત છે.",
}

FALLBACK_TRANSLATION = "Translation will appear here..."


class Translator:
    def __init__(self, translation_delay: float = 0.0):
        self.translation_delay = translation_delay

    def languages(self) -> list[Language]:
        return list(LANGUAGES)

    async def translate(self, text: str, language: str) -> TranslateResponse:
        if not text.strip():
            raise ValidationError("Text to translate cannot be empty", field="text")
        return await deferred(
            lambda: TranslateResponse(
                text=text,
                language=language,
                translation=TRANSLATIONS.get(language, FALLBACK_TRANSLATION),
            ),
            self.translation_delay,
        )
