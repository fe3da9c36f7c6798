"""Valuation service: FastAPI app serving the GraphQL schema and a liveness probe."""

from fastapi import FastAPI
from strawberry.fastapi import GraphQLRouter

from mcpricing.api.schema import VERSION, schema
from mcpricing.config import configure_logging

configure_logging()

app = FastAPI(title="Monte Carlo Valuation API", version=VERSION)
graphql_app = GraphQLRouter(schema)
app.include_router(graphql_app, prefix="/graphql")


@app.get("/health")
def health() -> dict[str, str]:
    """Liveness probe; does not touch any simulation."""
    return {"status": "ok"}
