# adminbounds/query.py

from urllib.parse import quote

# Admin levels fetched by the CLI: 2 = countries, 4 = regions/states
ADMIN_LEVELS = (2, 4)

QUERY_TEMPLATE = """
[timeout:300];
rel[admin_level={level}][type=boundary][boundary=administrative];
out geom qt;
"""

# Characters left as-is, same set as JavaScript's encodeURIComponent
_UNRESERVED = "-_.!~*'()"


def build_query(level: int) -> str:
    """Overpass QL selecting administrative boundary relations at `level`."""
    return QUERY_TEMPLATE.format(level=level)


def encode_body(query: str) -> str:
    """
    Encode an Overpass query as a form body with a single `data` field.

    Every character outside the unreserved set is UTF-8 percent-encoded,
    spaces included (as %20, not '+').
    """
    return "data=" + quote(query, safe=_UNRESERVED)


def output_filename(level: int) -> str:
    return f"al{level}.geom.osm"
