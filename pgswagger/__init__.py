"""Generate an OpenAPI document for a PostgREST schema."""
