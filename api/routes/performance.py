"""
Performance review endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import require_active_user
from api.schemas.performance import (
    PerformanceReviewCreate,
    PerformanceReviewFilters,
    PerformanceReviewResponse,
    PerformanceReviewUpdate,
)
from api.services import performance as review_service
from api.services.activity import record_activity
from database.engine import get_db
from database.models import User

router = APIRouter(prefix="/performance/reviews", tags=["performance"])


@router.get("", response_model=list[PerformanceReviewResponse], summary="List Reviews")
async def list_performance_reviews(
    employee_id: Optional[int] = Query(None, alias="employeeId", description="Filter by employee"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    filters = PerformanceReviewFilters(employee_id=employee_id)
    return await review_service.list_performance_reviews(db, filters)


@router.get("/{review_id}", response_model=PerformanceReviewResponse, summary="Get Review")
async def get_performance_review(
    review_id: int = Path(..., description="Review ID"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    review = await review_service.get_performance_review(db, review_id)
    if not review:
        raise HTTPException(status_code=404, detail="Performance review not found")
    return review


@router.post(
    "",
    response_model=PerformanceReviewResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Review",
)
async def create_performance_review(
    payload: PerformanceReviewCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    review = await review_service.create_performance_review(
        db, payload.model_dump(exclude_none=True)
    )

    await record_activity(
        db,
        user_id=current_user.id,
        action="create_performance_review",
        entity_type="performance_review",
        entity_id=review.id,
        description=f"Created {review.type.value} performance review for {review.period}",
    )
    return review


@router.put("/{review_id}", response_model=PerformanceReviewResponse, summary="Update Review")
async def update_performance_review(
    payload: PerformanceReviewUpdate,
    review_id: int = Path(..., description="Review ID"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    changes = payload.changes()
    review = await review_service.update_performance_review(db, review_id, changes)

    await record_activity(
        db,
        user_id=current_user.id,
        action="update_performance_review",
        entity_type="performance_review",
        entity_id=review.id,
        description=f"Updated performance review for {review.period} ({review.status.value})",
        metadata={"fields": sorted(changes)},
    )
    return review


@router.delete(
    "/{review_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Review",
)
async def delete_performance_review(
    review_id: int = Path(..., description="Review ID"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    review = await review_service.get_performance_review(db, review_id)
    if not review:
        raise HTTPException(status_code=404, detail="Performance review not found")
    await review_service.delete_performance_review(db, review_id)

    await record_activity(
        db,
        user_id=current_user.id,
        action="delete_performance_review",
        entity_type="performance_review",
        entity_id=review_id,
        description=f"Deleted performance review for {review.period}",
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
