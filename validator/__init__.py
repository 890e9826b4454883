"""
validator — walidator odnośników zbioru dokumentów.

Interfejs publiczny:
    check_links(docset)         — wszystkie zgłoszenia w zbiorze
    check_document(docset, doc) — zgłoszenia jednego dokumentu

Typowe użycie:
    from loader import load_directory
    from validator import check_links

    result = load_directory(Path("docs"))
    for issue in result.issues + check_links(result.docset):
        print(issue.code, issue.identifier, issue.message)
"""

from .link_checker import check_document, check_links

__all__ = [
    "check_document",
    "check_links",
]
