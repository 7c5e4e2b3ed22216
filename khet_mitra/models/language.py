from enum import Enum


class Language(str, Enum):
    ENGLISH = "en"
    HINDI = "hi"
    BENGALI = "bn"
    TELUGU = "te"
    MARATHI = "mr"
    TAMIL = "ta"
    URDU = "ur"
    GUJARATI = "gu"
    KANNADA = "kn"
    ODIA = "or"
    MALAYALAM = "ml"
    PUNJABI = "pa"
    ASSAMESE = "as"


LANGUAGE_LABELS = {
    Language.ENGLISH: "English",
    Language.HINDI: "Hindi (हिन्दी)",
    Language.BENGALI: "Bengali (বাংলা)",
    Language.TELUGU: "Telugu (తెలుగు)",
    Language.MARATHI: "Marathi (मराठी)",
    Language.TAMIL: "Tamil (தமிழ்)",
    Language.URDU: "Urdu (اردو)",
    Language.GUJARATI: "Gujarati (ગુજરાતી)",
    Language.KANNADA: "Kannada (ಕನ್ನಡ)",
    Language.ODIA: "Odia (ଓଡ଼ିଆ)",
    Language.MALAYALAM: "Malayalam (മലയാളം)",
    Language.PUNJABI: "Punjabi (ਪੰਜਾਬੀ)",
    Language.ASSAMESE: "Assamese (অসমীয়া)",
}
