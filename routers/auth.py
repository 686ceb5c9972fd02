from fastapi import APIRouter, Depends

from dependencies.security import get_user_context
from schemas.users import UserContext

router = APIRouter(prefix="/auth", tags=["auth"])

# ✅ [READ] who am I, and is the study profile filled in
@router.get("/me")
def read_me(user: UserContext = Depends(get_user_context)):
    return {
        "success": True,
        "data": {
            "user_id": user.user_id,
            "email": user.email,
            "profile_complete": user.profile_complete,
            "study_cycle_id": user.study_cycle_id,
        },
        "message": "Current user",
    }
