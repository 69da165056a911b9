"""
Sanitizer par défaut — sanitize(html) → html sûr.

Tags retirés avec leur contenu, gestionnaires on* supprimés,
attributs hors allowlist supprimés, URLs javascript: neutralisées.
import_html accepte n'importe quel callable équivalent.
"""
import re

from bs4 import BeautifulSoup

REMOVED_TAGS = ["script", "iframe", "object", "embed", "applet", "noscript"]

ALLOWED_ATTRS = frozenset({
    "style", "class", "id", "name", "for", "type", "placeholder", "required",
    "rows", "cols", "href", "target", "src", "alt", "width", "height",
    "colspan", "rowspan", "cellpadding", "cellspacing", "border", "bgcolor",
    "align", "valign", "role", "value", "checked", "selected", "maxlength",
    "lang", "title",
})

_URL_ATTRS = ("href", "src")
_SCRIPT_URL_RE = re.compile(r"^(?:javascript|vbscript):", re.IGNORECASE)
_DANGEROUS_RE = re.compile(
    r"<\s*(?:script|iframe|object|embed|applet)\b|javascript\s*:|\son\w+\s*=",
    re.IGNORECASE,
)


def _attr_allowed(name: str) -> bool:
    n = name.lower()
    if n.startswith("on"):
        return False
    return n in ALLOWED_ATTRS or n.startswith("data-") or n.startswith("aria-")


def _is_script_url(value) -> bool:
    # les navigateurs ignorent blancs et caractères de contrôle dans le schéma
    compact = re.sub(r"[\s\x00-\x1f]+", "", str(value))
    return bool(_SCRIPT_URL_RE.match(compact))


def sanitize_html(html: str) -> str:
    soup = BeautifulSoup(html or "", "html.parser")
    for tag in soup.find_all(REMOVED_TAGS):
        if not tag.decomposed:
            tag.decompose()
    for tag in soup.find_all(True):
        for name in list(tag.attrs):
            if not _attr_allowed(name):
                del tag[name]
            elif name.lower() in _URL_ATTRS and _is_script_url(tag[name]):
                del tag[name]
    return str(soup)


def has_dangerous_content(html: str) -> bool:
    """True si le markup contient un vecteur de script (tag, URL javascript:, on*=)."""
    return bool(_DANGEROUS_RE.search(html or ""))
