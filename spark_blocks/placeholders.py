"""
Placeholders de document : @Nom ou PH@Nom (remplis au moment de l'envoi).
"""
import html
import re
from typing import List

PLACEHOLDER_RE = re.compile(r"(?:PH)?@\w+")


def contains_placeholders(text: str) -> bool:
    return bool(PLACEHOLDER_RE.search(text or ""))


def extract_placeholders(text: str) -> List[str]:
    """Placeholders distincts, dans l'ordre d'apparition."""
    seen: List[str] = []
    for m in PLACEHOLDER_RE.finditer(text or ""):
        if m.group(0) not in seen:
            seen.append(m.group(0))
    return seen


def replace_placeholder(text: str, placeholder: str, value: str) -> str:
    # mot entier : @Name ne doit pas toucher @NameFull
    pattern = re.compile(re.escape(placeholder) + r"(?!\w)")
    return pattern.sub(lambda _: value, text or "")


def highlight_placeholders(text: str) -> str:
    """Texte échappé, placeholders entourés de <span class="placeholder">."""
    escaped = html.escape(text or "", quote=True)
    return PLACEHOLDER_RE.sub(lambda m: f'<span class="placeholder">{m.group(0)}</span>', escaped)
