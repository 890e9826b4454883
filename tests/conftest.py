import pytest

from loader import LoadResult, Source, load_documents


@pytest.fixture
def load_texts():
    """Builds a LoadResult from {identifier: text} (order of the dict is kept as sources order)."""
    def _load(texts: dict[str, str], order: list[str] | None = None) -> LoadResult:
        sources = [Source.from_text(ident, text) for ident, text in texts.items()]
        return load_documents(sources, order)
    return _load
