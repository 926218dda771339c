from schemaglance.search.domain.enums import SearchScope
from schemaglance.search.domain.model import ParsedQuery

COLUMN_SCOPE_PREFIX = ":col "
TABLE_SCOPE_PREFIX = ":table "

SCOPE_PREFIXES = (
    (COLUMN_SCOPE_PREFIX, SearchScope.COLUMN),
    (TABLE_SCOPE_PREFIX, SearchScope.TABLE),
)


def parse_search_query(raw_query: str) -> ParsedQuery:
    trimmed_query = raw_query.strip()

    for prefix, scope in SCOPE_PREFIXES:
        # trimming turns a bare ":col " into ":col", which still is a scope directive with an empty term
        if trimmed_query.startswith(prefix) or trimmed_query == prefix.rstrip():
            return ParsedQuery(scope=scope, term=trimmed_query[len(prefix) :].strip())

    return ParsedQuery(scope=None, term=trimmed_query)
