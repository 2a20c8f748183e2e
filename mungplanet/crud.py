from .models import AsyncSessionLocal
from .models.posts import Post
from .models.comments import Comment
from .errors import NotFound, Forbidden
from sqlalchemy import select, or_
from datetime import datetime, date, time, timezone

SUMMARY_COLUMNS = (
    Post.id, Post.name, Post.age, Post.breed, Post.cause, Post.date,
    Post.image_url, Post.is_public, Post.expose_until,
)

def utc_today() -> date:
    return datetime.now(timezone.utc).date()

# posts
async def create_post(payload):
    # unset or null is_public / lang fall back to the column defaults
    async with AsyncSessionLocal() as session:
        post = Post(**payload.model_dump(exclude_none=True))
        session.add(post)
        await session.commit()
        await session.refresh(post)
        return post

async def get_post(post_id: int):
    async with AsyncSessionLocal() as session:
        q = await session.execute(select(Post).where(Post.id == post_id))
        return q.scalars().first()

async def list_posts(today: date | None = None):
    """Public posts whose exposure window has not closed, newest first.

    ``today`` is evaluated once per call; an ``expose_until`` equal to it
    still counts as visible.
    """
    today = today or utc_today()
    async with AsyncSessionLocal() as session:
        q = select(*SUMMARY_COLUMNS).where(
            Post.is_public.is_(True),
            or_(Post.expose_until.is_(None), Post.expose_until >= today),
        ).order_by(Post.created_at.desc(), Post.id.desc())
        res = await session.execute(q)
        return [dict(row) for row in res.mappings().all()]

async def delete_post(post_id: int, password: str | None):
    # comments pointing at this post are kept on purpose
    async with AsyncSessionLocal() as session:
        q = await session.execute(select(Post).where(Post.id == post_id))
        post = q.scalars().first()
        if not post:
            raise NotFound('글이 존재하지 않음')
        if post.password is None or post.password != password:
            raise Forbidden('비밀번호 불일치')
        await session.delete(post)
        await session.commit()

# comments
async def create_comment(post_id: int, payload):
    async with AsyncSessionLocal() as session:
        q = await session.execute(select(Post.id).where(Post.id == post_id))
        if q.scalar() is None:
            raise NotFound('글이 존재하지 않음')
        c = Comment(
            post_id=post_id,
            name=payload.name,
            text=payload.text,
            password=payload.password,
            created_at=datetime.combine(utc_today(), time.min, tzinfo=timezone.utc),
        )
        if payload.id:
            c.id = payload.id
        session.add(c)
        await session.commit()
        await session.refresh(c)
        return c

async def list_comments(post_id: int):
    async with AsyncSessionLocal() as session:
        q = select(Comment).where(Comment.post_id == post_id).order_by(
            Comment.created_at.desc(), Comment.id.desc()
        )
        res = await session.execute(q)
        return res.scalars().all()

async def delete_comment(comment_id: int, password: str | None):
    """Delete a comment if ``password`` matches its own or its post's.

    The parent lookup and the delete are separate statements; once the parent
    post is gone only the comment's own password can authorize.
    """
    async with AsyncSessionLocal() as session:
        q = await session.execute(select(Comment).where(Comment.id == comment_id))
        comment = q.scalars().first()
        if not comment:
            raise NotFound('댓글 없음')
        pq = await session.execute(select(Post.password).where(Post.id == comment.post_id))
        post_password = pq.scalar()
        is_comment_writer = password is not None and comment.password == password
        is_post_owner = password is not None and post_password is not None and post_password == password
        if not is_comment_writer and not is_post_owner:
            raise Forbidden('비밀번호 불일치')
        await session.delete(comment)
        await session.commit()
