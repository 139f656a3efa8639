from pydantic import AnyUrl, TypeAdapter, ValidationError


__all__ = (
    'try_parse_url',
)


_URL_ADAPTER = TypeAdapter(AnyUrl)


def try_parse_url(value: str) -> AnyUrl | None:
    """parse an absolute url, returning None instead of raising"""
    try:
        return _URL_ADAPTER.validate_python(value)
    except ValidationError:
        return None
