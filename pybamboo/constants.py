"""Constants for pybamboo: cache sizing, locales and mouse gestures."""

# Segmentation cache capacity (entries). The same line is queried on every
# cursor move across it, so a small cache keeps the hit rate high.
CACHE_MAX = 128

# Locales with a dedicated locale-aware word segmenter
SUPPORTED_LOCALES = ("zh", "ja", "ko")
DEFAULT_LOCALE = "zh"

# Mouse button / click count that starts a CJK word drag
PRIMARY_BUTTON = 0
WORD_CLICK_COUNT = 2
