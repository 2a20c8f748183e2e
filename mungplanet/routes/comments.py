import logging
from fastapi import APIRouter
from ..schemas.comments import CommentIn, CommentOut
from ..schemas.posts import CreatedOut, PasswordIn, SuccessOut
from ..crud import create_comment, list_comments, delete_comment
from ..errors import ApiError, InternalError
from typing import List

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post('/posts/{post_id}/comments', response_model=CreatedOut, status_code=201)
async def create(post_id: int, payload: CommentIn):
    try:
        c = await create_comment(post_id, payload)
    except ApiError:
        raise
    except Exception:
        logger.exception({'msg': 'comment_create_failed', 'post_id': post_id})
        raise InternalError('댓글 등록 실패')
    return {'id': c.id}

@router.get('/posts/{post_id}/comments', response_model=List[CommentOut])
async def by_post(post_id: int):
    try:
        return await list_comments(post_id)
    except Exception:
        logger.exception({'msg': 'comment_list_failed', 'post_id': post_id})
        raise InternalError('댓글 불러오기 실패')

@router.post('/comments/{comment_id}/delete', response_model=SuccessOut)
async def delete(comment_id: int, payload: PasswordIn):
    try:
        await delete_comment(comment_id, payload.password)
    except ApiError:
        raise
    except Exception:
        logger.exception({'msg': 'comment_delete_failed', 'comment_id': comment_id})
        raise InternalError('삭제 실패')
    return {'success': True}
