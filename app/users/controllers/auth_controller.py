from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.core.dependencies import CurrentUser, get_current_user
from app.users.schemas.user_schema import LoginRequest, RegisterRequest, UserOut
from app.users.services.user_service import UserService

router = APIRouter()


@router.post("/register", status_code=201)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    """Create a regular user account and log it in."""
    user_service = UserService(db)
    user = user_service.register(payload.name, payload.email, payload.password)
    return {
        "message": "User registered successfully",
        "token": user_service.issue_token(user),
        "user": UserOut.model_validate(user),
    }


@router.post("/login")
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    user, token = UserService(db).authenticate(payload.email, payload.password)
    return {"message": "Login successful", "token": token, "user": UserOut.model_validate(user)}


@router.get("/me")
def me(current_user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    user = UserService(db).get_user(current_user.user_id)
    return {"user": UserOut.model_validate(user)}
