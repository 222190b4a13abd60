from typing import List
from fastapi import APIRouter, Depends
from .. import schemas
from ..dependencies import get_expected_category_distribution_service
from ..services.expected_category_distribution_service import ExpectedCategoryDistributionService

router = APIRouter(
    prefix="/expected-category-distribution",
    tags=["Expected Category Distributions"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[schemas.ExpectedCategoryDistributionResponse])
def list_distributions(
    service: ExpectedCategoryDistributionService = Depends(get_expected_category_distribution_service)
):
    """List every target distribution of the current user"""
    return service.get_all_distributions()


@router.post(
    "/search",
    response_model=schemas.PaginatedResponse[schemas.ExpectedCategoryDistributionResponse]
)
def search_distributions(
    request: schemas.ExpectedCategoryDistributionSearchRequest,
    service: ExpectedCategoryDistributionService = Depends(get_expected_category_distribution_service)
):
    """Search the current user's target distributions with pagination"""
    return service.search_expected_category_distributions(request)


@router.get("/{distribution_id}", response_model=schemas.ExpectedCategoryDistributionResponse)
def get_distribution(
    distribution_id: int,
    service: ExpectedCategoryDistributionService = Depends(get_expected_category_distribution_service)
):
    """Get a target distribution by id"""
    return service.get_expected_category_distribution_by_id(distribution_id)


@router.post("", response_model=schemas.OperationResult)
def create_distribution(
    request: schemas.ExpectedCategoryDistributionRequest,
    service: ExpectedCategoryDistributionService = Depends(get_expected_category_distribution_service)
):
    """Create the target distribution for a category"""
    return service.create_expected_category_distribution(request)


@router.put("/{distribution_id}", response_model=schemas.OperationResult)
def update_distribution(
    distribution_id: int,
    request: schemas.ExpectedCategoryDistributionUpdateRequest,
    service: ExpectedCategoryDistributionService = Depends(get_expected_category_distribution_service)
):
    """Update the target range of a distribution"""
    return service.update_expected_category_distribution(distribution_id, request)


@router.delete("/{distribution_id}", response_model=schemas.OperationResult)
def delete_distribution(
    distribution_id: int,
    service: ExpectedCategoryDistributionService = Depends(get_expected_category_distribution_service)
):
    """Delete a target distribution by id"""
    return service.delete_expected_category_distribution(distribution_id)
