"""ASGI plumbing: request pipeline, error responses, response sending."""
