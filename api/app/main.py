"""FastAPI app with Strawberry GraphQL."""

import os

from fastapi import FastAPI
from strawberry.fastapi import GraphQLRouter

from fxsettle.log import configure_logging

from app.schema import VERSION, schema

configure_logging(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    format_json=os.environ.get("LOG_FORMAT", "console") == "json",
)

app = FastAPI(title="Settlement API", version=VERSION)
graphql_app = GraphQLRouter(schema)
app.include_router(graphql_app, prefix="/graphql")


@app.get("/health")
def health() -> dict[str, str]:
    """Health check for load balancers and Docker."""
    return {"status": "ok"}
