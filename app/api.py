from fastapi import APIRouter
from app.users.controllers.auth_controller import router as auth_router
from app.teams.controllers.team_controller import router as team_router
from app.leagues.controllers.league_controller import router as league_router
from app.matches.controllers.match_controller import router as match_router
from app.grounds.controllers.ground_controller import router as ground_router
from app.bookings.controllers.booking_controller import router as booking_router

api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(team_router, prefix="/teams", tags=["teams"])
api_router.include_router(league_router, prefix="/leagues", tags=["leagues"])
api_router.include_router(match_router, prefix="/matches", tags=["matches"])
api_router.include_router(ground_router, prefix="/grounds", tags=["grounds"])
api_router.include_router(booking_router, prefix="/bookings", tags=["bookings"])
