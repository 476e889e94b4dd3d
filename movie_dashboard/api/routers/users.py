"""
User listing and profile endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException

from movie_dashboard.api.dependencies import get_engine
from movie_dashboard.api.models.user import UserList, UserProfileResponse
from movie_dashboard.core.engine import DashboardEngine

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=UserList)
def list_users(engine: DashboardEngine = Depends(get_engine)):
    """Distinct user ids in the dataset, sorted."""
    users = engine.user_ids()
    return UserList(users=users, total=len(users))


@router.get("/{user_id}/profile", response_model=UserProfileResponse)
def get_user_profile(user_id: str, engine: DashboardEngine = Depends(get_engine)):
    """Aggregated profile for one user."""
    profile = engine.profile(user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="User not found")
    return UserProfileResponse.model_validate(profile)
