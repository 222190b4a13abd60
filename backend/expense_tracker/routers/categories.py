from typing import List
from fastapi import APIRouter, Depends
from .. import schemas
from ..dependencies import get_category_service
from ..services.category_service import CategoryService

router = APIRouter(
    prefix="/category",
    tags=["Categories"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[schemas.CategoryResponse])
def list_categories(service: CategoryService = Depends(get_category_service)):
    """List all categories of the current user"""
    return service.get_all_categories()


@router.post("/search", response_model=schemas.PaginatedResponse[schemas.CategoryResponse])
def search_categories(
    request: schemas.CategorySearchRequest,
    service: CategoryService = Depends(get_category_service)
):
    """Search the current user's categories with pagination"""
    return service.search_categories(request)


@router.get("/{category_id}", response_model=schemas.CategoryResponse)
def get_category(category_id: int, service: CategoryService = Depends(get_category_service)):
    """Get a category by id"""
    return service.get_category_by_id(category_id)


@router.post("", response_model=schemas.OperationResult)
def create_category(
    request: schemas.CategoryRequest,
    service: CategoryService = Depends(get_category_service)
):
    """Create a category for the current user"""
    return service.create_category(request)


@router.put("/{category_id}", response_model=schemas.OperationResult)
def update_category(
    category_id: int,
    request: schemas.CategoryRequest,
    service: CategoryService = Depends(get_category_service)
):
    """Update a category by id"""
    return service.update_category(category_id, request)


@router.delete("/{category_id}", response_model=schemas.OperationResult)
def delete_category(category_id: int, service: CategoryService = Depends(get_category_service)):
    """Delete a category by id, together with its expenses and distribution"""
    return service.delete_category(category_id)
