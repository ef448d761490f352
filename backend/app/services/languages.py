# 언어 선택 드롭다운에 노출되는 목록 (첫 항목 = 원문 언어)
SUPPORTED_LANGUAGES = [
    {"code": "ko", "name": "한국어", "flag": "🇰🇷"},
    {"code": "en", "name": "English", "flag": "🇺🇸"},
    {"code": "ja", "name": "日本語", "flag": "🇯🇵"},
    {"code": "zh", "name": "中文", "flag": "🇨🇳"},
    {"code": "zh-TW", "name": "繁體中文", "flag": "🇹🇼"},
    {"code": "es", "name": "Español", "flag": "🇪🇸"},
    {"code": "fr", "name": "Français", "flag": "🇫🇷"},
    {"code": "de", "name": "Deutsch", "flag": "🇩🇪"},
    {"code": "it", "name": "Italiano", "flag": "🇮🇹"},
    {"code": "pt", "name": "Português", "flag": "🇵🇹"},
    {"code": "ru", "name": "Русский", "flag": "🇷🇺"},
    {"code": "ar", "name": "العربية", "flag": "🇸🇦"},
    {"code": "hi", "name": "हिन्दी", "flag": "🇮🇳"},
    {"code": "th", "name": "ไทย", "flag": "🇹🇭"},
    {"code": "vi", "name": "Tiếng Việt", "flag": "🇻🇳"},
    {"code": "id", "name": "Bahasa Indonesia", "flag": "🇮🇩"},
    {"code": "ms", "name": "Bahasa Melayu", "flag": "🇲🇾"},
    {"code": "tl", "name": "Filipino", "flag": "🇵🇭"},
]

LANGUAGE_CODES = {lang["code"] for lang in SUPPORTED_LANGUAGES}


def language_name(code: str) -> str:
    for lang in SUPPORTED_LANGUAGES:
        if lang["code"] == code:
            return lang["name"]
    return code
