import logging
from fastapi import APIRouter
from ..schemas.posts import PostIn, PostOut, PostSummaryOut, CreatedOut, PasswordIn, SuccessOut
from ..crud import create_post, get_post, list_posts, delete_post
from ..errors import ApiError, NotFound, InternalError
from typing import List

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post('', response_model=CreatedOut, status_code=201)
async def create(payload: PostIn):
    try:
        post = await create_post(payload)
    except Exception:
        logger.exception({'msg': 'post_create_failed'})
        raise InternalError('등록 실패')
    return {'id': post.id}

@router.get('', response_model=List[PostSummaryOut])
async def public_list():
    try:
        posts = await list_posts()
    except Exception:
        logger.exception({'msg': 'post_list_failed'})
        raise InternalError('DB 오류')
    logger.info({'msg': 'post_list', 'count': len(posts)})
    return posts

@router.get('/{post_id}', response_model=PostOut)
async def detail(post_id: int):
    # no visibility filter here: private and expired posts stay reachable by id
    try:
        post = await get_post(post_id)
    except Exception:
        logger.exception({'msg': 'post_fetch_failed', 'post_id': post_id})
        raise InternalError('DB 오류')
    if not post:
        raise NotFound('존재하지 않음')
    return post

@router.post('/{post_id}/delete', response_model=SuccessOut)
async def delete(post_id: int, payload: PasswordIn):
    try:
        await delete_post(post_id, payload.password)
    except ApiError:
        raise
    except Exception:
        logger.exception({'msg': 'post_delete_failed', 'post_id': post_id})
        raise InternalError('삭제 실패')
    return {'success': True}
