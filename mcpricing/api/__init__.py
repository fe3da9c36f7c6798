"""GraphQL valuation service (FastAPI + Strawberry)."""
