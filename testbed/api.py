"""REST API endpoints for users, products and diagnostics."""

import re
from typing import List

from fastapi import APIRouter, Depends, Request, Response

from testbed.errors import BadRequestError
from testbed.models.dto import (
    HealthResponse,
    ProductCreateRequest,
    ProductDTO,
    ProductUpdateRequest,
    RandomResponse,
    ReadinessResponse,
    SlowResponse,
    UserCreateRequest,
    UserDTO,
    UserUpdateRequest,
    VersionResponse,
)
from testbed.services.diagnostics_service import DiagnosticsService
from testbed.services.product_service import ProductService
from testbed.services.user_service import UserService

router = APIRouter()
probe_router = APIRouter()

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def get_user_service(request: Request) -> UserService:
    """Get the user service owned by this app instance."""
    return request.app.state.user_service


def get_product_service(request: Request) -> ProductService:
    """Get the product service owned by this app instance."""
    return request.app.state.product_service


def get_diagnostics_service(request: Request) -> DiagnosticsService:
    """Get the diagnostics service owned by this app instance."""
    return request.app.state.diagnostics_service


def parse_id(raw: str, resource: str) -> int:
    """Decode a path parameter into an integer ID.

    Raises:
        BadRequestError: If the value is not a base-10 integer
    """
    if not _ID_PATTERN.fullmatch(raw):
        raise BadRequestError(f"Invalid {resource} ID")
    return int(raw)


# Probes

@probe_router.get("/health", response_model=HealthResponse)
def health(diagnostics: DiagnosticsService = Depends(get_diagnostics_service)):
    """Liveness probe."""
    return diagnostics.health()


@probe_router.get("/ready", response_model=ReadinessResponse)
def ready(diagnostics: DiagnosticsService = Depends(get_diagnostics_service)):
    """Readiness probe."""
    return diagnostics.readiness()


@probe_router.get("/version", response_model=VersionResponse)
def version(diagnostics: DiagnosticsService = Depends(get_diagnostics_service)):
    """Build information."""
    return diagnostics.version()


# Users

@router.get("/users", response_model=List[UserDTO])
def list_users(user_service: UserService = Depends(get_user_service)):
    """List all users."""
    return user_service.list_users()


@router.get("/users/{user_id}", response_model=UserDTO)
def get_user(user_id: str, user_service: UserService = Depends(get_user_service)):
    """Get a single user."""
    return user_service.get_user(parse_id(user_id, "user"))


@router.post("/users", response_model=UserDTO, status_code=201)
def create_user(
    payload: UserCreateRequest,
    user_service: UserService = Depends(get_user_service),
):
    """Create a new user."""
    return user_service.create_user(payload)


@router.put("/users/{user_id}", response_model=UserDTO)
def update_user(
    user_id: str,
    payload: UserUpdateRequest,
    user_service: UserService = Depends(get_user_service),
):
    """Merge the supplied fields into an existing user."""
    return user_service.update_user(parse_id(user_id, "user"), payload)


@router.delete("/users/{user_id}", status_code=204)
def delete_user(user_id: str, user_service: UserService = Depends(get_user_service)):
    """Delete a user."""
    user_service.delete_user(parse_id(user_id, "user"))
    return Response(status_code=204)


# Products

@router.get("/products", response_model=List[ProductDTO])
def list_products(product_service: ProductService = Depends(get_product_service)):
    """List all products."""
    return product_service.list_products()


@router.get("/products/{product_id}", response_model=ProductDTO)
def get_product(
    product_id: str,
    product_service: ProductService = Depends(get_product_service),
):
    """Get a single product."""
    return product_service.get_product(parse_id(product_id, "product"))


@router.post("/products", response_model=ProductDTO, status_code=201)
def create_product(
    payload: ProductCreateRequest,
    product_service: ProductService = Depends(get_product_service),
):
    """Create a new product."""
    return product_service.create_product(payload)


@router.put("/products/{product_id}", response_model=ProductDTO)
def update_product(
    product_id: str,
    payload: ProductUpdateRequest,
    product_service: ProductService = Depends(get_product_service),
):
    """Merge the supplied fields into an existing product."""
    return product_service.update_product(parse_id(product_id, "product"), payload)


# Fault injection

@router.get("/slow", response_model=SlowResponse)
def slow(diagnostics: DiagnosticsService = Depends(get_diagnostics_service)):
    """Answer after a fixed delay. Runs in the threadpool, so only this request waits."""
    return diagnostics.slow()


@router.get("/error")
def error(diagnostics: DiagnosticsService = Depends(get_diagnostics_service)):
    """Always fails with 500."""
    diagnostics.fail()


@router.get("/random", response_model=RandomResponse)
def random(diagnostics: DiagnosticsService = Depends(get_diagnostics_service)):
    """200 on even Unix seconds, 503 on odd ones."""
    return diagnostics.random()
