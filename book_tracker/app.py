from typing import List

from fastapi import APIRouter, Depends, FastAPI, Request, status

from .config import Settings, get_settings
from .errors import register_error_handlers
from .middleware import install_middleware
from .models import ApiResponse, Book, CreateBook, UpdateBook
from .otel import configure_otel
from .registry import BookRegistry, seed_books
from .service import BookService, parse_book_id


def get_registry(request: Request) -> BookRegistry:
    return request.app.state.registry


def get_book_service(registry: BookRegistry = Depends(get_registry)) -> BookService:
    return BookService(registry)


router = APIRouter(tags=["books"])


@router.get("/health", tags=["health"])
def health() -> dict:
    return {"status": "ok"}


@router.get("/books", response_model=ApiResponse[List[Book]], response_model_exclude_none=True)
def list_books(service: BookService = Depends(get_book_service)):
    return {"success": True, "data": service.list()}


# Literal paths must be registered ahead of /books/{book_id}.
@router.get("/books/completed", response_model=ApiResponse[List[Book]], response_model_exclude_none=True)
def list_completed_books(service: BookService = Depends(get_book_service)):
    return {"success": True, "data": service.completed()}


@router.get("/books/search", response_model=ApiResponse[List[Book]], response_model_exclude_none=True)
def search_books(title: str | None = None, service: BookService = Depends(get_book_service)):
    return {"success": True, "data": service.search(title)}


@router.get("/books/{book_id}", response_model=ApiResponse[Book], response_model_exclude_none=True)
def get_book(book_id: str, service: BookService = Depends(get_book_service)):
    return {"success": True, "data": service.get(parse_book_id(book_id))}


@router.post(
    "/books",
    response_model=ApiResponse[Book],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_book(payload: CreateBook | None = None, service: BookService = Depends(get_book_service)):
    return {"success": True, "data": service.create(payload or CreateBook())}


@router.put("/books/{book_id}", response_model=ApiResponse[Book], response_model_exclude_none=True)
def update_book(book_id: str, payload: UpdateBook | None = None, service: BookService = Depends(get_book_service)):
    book = service.update(parse_book_id(book_id), payload or UpdateBook())
    return {"success": True, "data": book, "message": "Book updated successfully"}


@router.delete("/books/{book_id}", response_model=ApiResponse[None], response_model_exclude_none=True)
def delete_book(book_id: str, service: BookService = Depends(get_book_service)):
    service.delete(parse_book_id(book_id))
    return {"success": True, "message": "Book deleted successfully"}


def create_app(settings: Settings | None = None, registry: BookRegistry | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.version,
        description="An in-memory book tracking API.",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    if registry is None:
        registry = BookRegistry(seed_books() if settings.seed_books else ())
    app.state.registry = registry
    app.state.settings = settings

    app.include_router(router)
    register_error_handlers(app)
    install_middleware(app, settings)
    configure_otel(app, settings)
    return app


app = create_app()
