"""HTTP primitives: headers, request, responses, dates, and content types."""
