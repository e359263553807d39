"""Static content served whenever the model is unreachable or unusable."""
from typing import Any, Dict, List

FALLBACKS: Dict[str, Any] = {
    "hint": "Junta la consonante con la vocal 🙂",
    "match_hint": 'Empieza con "{initial}".',
    "math_hint": "Cuenta despacito con tu dedo: uno, dos, tres…",
    "exercises": (
        {"syllable": "MA", "letters": ("M", "A"), "hint": "M + A"},
        {"syllable": "PE", "letters": ("P", "E"), "hint": "P + E"},
        {"syllable": "LI", "letters": ("L", "I"), "hint": "L + I"},
        {"syllable": "SO", "letters": ("S", "O"), "hint": "S + O"},
        {"syllable": "TU", "letters": ("T", "U"), "hint": "T + U"},
    ),
}

NO_AI_ERROR = "no_ai"


def match_hint_fallback(target_word: Any) -> str:
    """First character of the target word, upper-cased, in the fixed phrase."""
    word = "" if target_word is None else str(target_word)
    return FALLBACKS["match_hint"].format(initial=word[:1].upper())


def fallback_exercises(count: int) -> List[Dict[str, Any]]:
    # fresh copies, callers may serialize or mutate them
    return [
        {"syllable": e["syllable"], "letters": list(e["letters"]), "hint": e["hint"]}
        for e in FALLBACKS["exercises"][:max(count, 0)]
    ]
