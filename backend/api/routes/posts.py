"""Wall feed: list and publish posts."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.deps import get_wall_service
from api.helpers import post_view, unwrap
from schemas.requests import PostCreate
from wall_service import WallService

router = APIRouter(prefix="/api/posts", tags=["posts"])

Service = Annotated[WallService, Depends(get_wall_service)]


@router.get("")
def list_posts(service: Service):
    return JSONResponse({"posts": [post_view(p) for p in service.list_posts()]})


@router.post("")
def create_post(body: PostCreate, service: Service):
    post = unwrap(service.create_post(body.content))
    return JSONResponse({"post": post_view(post), "message": "Post published!"}, status_code=201)
