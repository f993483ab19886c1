"""HTTP primitives: immutable request, response, headers, and form data."""
