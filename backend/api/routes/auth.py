"""Register, sign in, sign out, current session."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.deps import get_wall_service
from api.helpers import unwrap
from schemas.requests import RegisterRequest, SignInRequest
from wall_service import WallService

router = APIRouter(prefix="/api/auth", tags=["auth"])

Service = Annotated[WallService, Depends(get_wall_service)]


@router.post("/register")
def register(body: RegisterRequest, service: Service):
    user = unwrap(service.register(body.username, body.first_name, body.last_name, body.password))
    return JSONResponse(
        {
            "user": user.public().model_dump(mode="json"),
            "message": "Account created. You can now sign in!",
        },
        status_code=201,
    )


@router.post("/signin")
def sign_in(body: SignInRequest, service: Service):
    user = unwrap(service.sign_in(body.username, body.password))
    return JSONResponse({
        "user": user.public().model_dump(mode="json"),
        "message": f"Welcome, {user.first_name}!",
    })


@router.post("/signout")
def sign_out(service: Service):
    unwrap(service.sign_out())
    return JSONResponse({"message": "Signed out successfully"})


@router.get("/session")
def current_session(service: Service):
    user = service.current_user
    return JSONResponse({"user": user.public().model_dump(mode="json") if user else None})
