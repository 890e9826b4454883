"""
renderer/template.py — szablon strony i escapowanie HTML.

Szablon zawiera placeholdery {{NAZWA}}; wypełnianie jest jednoprzebiegowe,
więc treść wstawiona w miejsce placeholdera (np. przykład kodu zawierający
"{{BODY}}") nigdy nie jest ponownie skanowana.

Placeholdery:
  {{TITLE}} {{LANG}} {{NAV}} {{BODY}}
  {{INDEX}} — względny adres spisu treści ("" gdy spis nie jest generowany)
"""

from __future__ import annotations

import html
import pathlib
import re

DEFAULT_TEMPLATE = """<!DOCTYPE html>
<html lang="{{LANG}}">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{{TITLE}}</title>
</head>
<body>
{{NAV}}
<main>
{{BODY}}
</main>
{{NAV}}
</body>
</html>
"""

_PLACEHOLDER_RE = re.compile(r"\{\{([A-Z_]+)\}\}")


def escape_text(text: str) -> str:
    """Tekst w treści elementu (& < >)."""
    return html.escape(text, quote=False)


def escape_attr(text: str) -> str:
    """Wartość atrybutu (& < > " ')."""
    return html.escape(text, quote=True)


def fill_template(template: str, values: dict[str, str]) -> str:
    """Zastępuje placeholdery; nieznane zostają bez zmian."""
    return _PLACEHOLDER_RE.sub(lambda m: values.get(m.group(1), m.group(0)), template)


def load_template(path: pathlib.Path) -> str:
    if not path.exists():
        raise FileNotFoundError(f"Brak pliku szablonu: {path}")
    return path.read_text(encoding="utf-8")
