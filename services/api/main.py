"""
FastAPI server for running the movie Lambda handlers locally

Each route converts the HTTP request into an API Gateway proxy event, calls
the matching Lambda handler and returns its response unchanged.
"""
import base64
import logging
from datetime import datetime
from typing import Any, Callable, Dict, List

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from lambda_handlers import movies
from shared import Movie, SearchResult, config
from shared.database import database

logger = logging.getLogger(__name__)

Handler = Callable[[Dict[str, Any], Any], Dict[str, Any]]


# Create FastAPI app
app = FastAPI(
    title=config.app.name,
    description="CRUD and search for movies stored in DynamoDB",
    version=config.app.version,
    docs_url="/docs" if config.app.debug else None,
    redoc_url="/redoc" if config.app.debug else None
)


async def to_event(request: Request, resource: str) -> Dict[str, Any]:
    """Build an API Gateway proxy event from an HTTP request"""
    body = await request.body()
    is_base64_encoded = False
    try:
        text = body.decode("utf-8") if body else None
    except UnicodeDecodeError:
        # Pass binary payloads on the way API Gateway does
        text = base64.b64encode(body).decode("ascii")
        is_base64_encoded = True
    return {
        "resource": resource,
        "path": request.url.path,
        "httpMethod": request.method,
        "headers": dict(request.headers),
        "queryStringParameters": dict(request.query_params) or None,
        "pathParameters": dict(request.path_params) or None,
        "body": text,
        "isBase64Encoded": is_base64_encoded,
    }


def to_response(result: Dict[str, Any]) -> Response:
    """Convert a Lambda proxy response into an HTTP response"""
    return Response(
        content=result.get("body", ""),
        status_code=result["statusCode"],
        headers=result.get("headers") or {},
    )


async def invoke(handler: Handler, request: Request, resource: str) -> Response:
    event = await to_event(request, resource)
    logger.debug(f"{event['httpMethod']} {event['path']} -> {handler.__name__}")
    return to_response(handler(event, None))


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    services = {}

    table_status = database.health_check()
    services["dynamodb"] = "healthy" if table_status == "ACTIVE" else f"unhealthy: {table_status}"

    status = "healthy" if all(s == "healthy" for s in services.values()) else "degraded"

    return {
        "status": status,
        "timestamp": datetime.utcnow().isoformat(),
        "version": config.app.version,
        "environment": config.app.environment,
        "services": services,
    }


@app.post("/movies", status_code=201, responses={201: {"model": Movie}})
async def create_movie(request: Request):
    """Create a movie"""
    return await invoke(movies.create_movie, request, "/movies")


@app.get("/movies", responses={200: {"model": List[Movie]}})
async def list_movies(request: Request):
    """List all movies"""
    return await invoke(movies.list_movies, request, "/movies")


@app.get("/movies/search/{queryParams}", responses={200: {"model": List[SearchResult]}})
async def search_movies(queryParams: str, request: Request):
    """Exact match search, e.g. /movies/search/movie_name=Dune"""
    return await invoke(movies.search_movies, request, "/movies/search/{queryParams}")


@app.get("/movies/{id}", responses={200: {"model": Movie}})
async def get_movie(id: str, request: Request):
    """Get a movie by ID"""
    return await invoke(movies.get_movie, request, "/movies/{id}")


@app.put("/movies/{id}", responses={200: {"model": Movie}})
async def update_movie(id: str, request: Request):
    """Replace a movie"""
    return await invoke(movies.update_movie, request, "/movies/{id}")


@app.delete("/movies/{id}", status_code=204)
async def delete_movie(id: str, request: Request):
    """Delete a movie"""
    return await invoke(movies.delete_movie, request, "/movies/{id}")


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler"""
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=config.app.host,
        port=config.app.port,
        log_level=config.app.log_level.lower(),
        reload=config.app.debug
    )
