"""API request/response schemas (pydantic). Wire names are camelCase via aliases."""
