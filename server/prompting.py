# server/prompting.py
from __future__ import annotations
import json
from typing import Any, List, Dict

from prompts.kid_prompts import (
    SYSTEM_KID_SPANISH,
    SYSTEM_MATCH_HINT,
    SYSTEM_MATH_HINT,
    CONSONANTS,
    VOWELS,
    EXERCISE_FORMAT_EXAMPLE,
)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _join(items: Any) -> str:
    """Comma-join a caller list; anything that is not a list renders empty."""
    if not isinstance(items, list):
        return ""
    return ", ".join(_text(i) for i in items)


class PromptBuilder:
    """
    Builds message lists for the OpenAI Responses API, one builder per game.
    Caller values are embedded as given (no escaping, no length limits).
    """

    def build_syllable_hint_messages(
        self,
        *,
        target_syllable: Any,
        slots: Any,
        letters: Any,
    ) -> List[Dict[str, str]]:
        # null slots mean "empty" for the model
        slots_json = json.dumps(slots, ensure_ascii=False, separators=(",", ":"))
        user = (
            f'Estamos armando la sílaba "{_text(target_syllable)}". '
            f"Casillas: {slots_json} (null=vacío). "
            f"Letras disponibles: {_join(letters)}. "
            f"Da UNA sola pista muy breve y positiva para un niño de 3-4 años."
        )
        return [
            {"role": "system", "content": SYSTEM_KID_SPANISH},
            {"role": "user", "content": user},
        ]

    def build_exercises_messages(self, *, count: int) -> List[Dict[str, str]]:
        user = (
            f"Crea {count} ejercicios de sílabas abiertas (CV). "
            f"Solo consonantes: {', '.join(CONSONANTS)}. Solo vocales: {', '.join(VOWELS)}. "
            f"Devuélvelos en JSON estrictamente como un arreglo de objetos:\n"
            f"{EXERCISE_FORMAT_EXAMPLE}\n"
            f"Sin texto extra."
        )
        return [
            {"role": "system", "content": SYSTEM_KID_SPANISH},
            {"role": "user", "content": user},
        ]

    def build_match_hint_messages(self, *, target_word: Any, options: Any) -> List[Dict[str, str]]:
        user = (
            "Juego: emparejar palabra con imagen.\n"
            f'Palabra objetivo: "{_text(target_word)}".\n'
            f"Otras palabras en pantalla: {_join(options)}.\n"
            'Da UNA pista muy breve. Ej.: "Empieza con Ssss" o "Da luz y está en el cielo".'
        )
        return [
            {"role": "system", "content": SYSTEM_MATCH_HINT},
            {"role": "user", "content": user},
        ]

    def build_math_hint_messages(self, *, target_number: Any, options: Any) -> List[Dict[str, str]]:
        user = (
            "Juego: contar manzanas.\n"
            f"Número correcto (no lo digas): {_text(target_number)}.\n"
            f"Opciones en pantalla: {_join(options)}.\n"
            "Da UNA pista muy breve, amable y sin revelar la respuesta."
        )
        return [
            {"role": "system", "content": SYSTEM_MATH_HINT},
            {"role": "user", "content": user},
        ]
