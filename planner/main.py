"""FastAPI application entry point."""
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from strawberry.fastapi import GraphQLRouter

from planner.config import settings
from planner.schema import schema
from planner.store import RecordStore, get_store, load_store


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Seed the in-memory store from the dataset; state is dropped on shutdown."""
    app.state.store = load_store(settings.DATA_FILE)
    yield


async def get_context(store: RecordStore = Depends(get_store)) -> dict:
    """Expose the store to resolvers as ``info.context["store"]``."""
    return {"store": store}


app = FastAPI(
    title="Event Planner",
    description="GraphQL API over in-memory users, events, locations and participants",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

graphql_app = GraphQLRouter(
    schema,
    context_getter=get_context,
    graphql_ide="graphiql" if settings.GRAPHIQL else None,
)
app.include_router(graphql_app, prefix="/graphql")


@app.get("/api/health")
def health_check():
    return {"status": "ok"}
