"""Example: building request URLs with urlbat."""

from urlbat import (
    UNDEFINED,
    MissingPathParameterError,
    UrlBuilder,
    build,
    configure_logging,
)

configure_logging(level="DEBUG")

# Base + path template + params
print(build("http://example.com/", "/users/:userId/posts", {"userId": 7, "limit": 10}))

# Single template; unused params become a sorted query string
print(build("/search", {"q": "python tips", "page": 0, "lang": None, "tag": UNDEFINED}))

# Bound builder with default params
api = UrlBuilder("https://api.example.com/v1", {"format": "json"})
print(api.with_params(token="abc").build("/items/:id", {"id": "a b"}))

try:
    build("/users/:id", {"id": None})
except MissingPathParameterError as e:
    print(f"Error: {e}")
