from typing import Optional

from fastapi import APIRouter, Depends, Response, status

from ncnews.apis.params import ArticleId
from ncnews.schemas import articles as schema_article
from ncnews.schemas import comments as schema_comment
from ncnews.schemas.votes import VotesIn
from ncnews.services.article_service import ArticleService, get_article_service
from ncnews.services.comment_service import CommentService, get_comment_service

router = APIRouter()
' prefix="/api/articles"'


@router.get("",
            response_model=schema_article.ArticlesResponse,
            summary="게시글 목록",
            description="Sorted, optionally topic-filtered, paginated article listing with total_count.",
            responses={400: {
                "description": "Invalid sort_by/order/pagination",
                "content": {"application/json": {"example": {"msg": "Limit and page number must be greater than 0"}}}
            }, 404: {
                "description": "Unknown topic",
                "content": {"application/json": {"example": {"msg": "Topic not found"}}}
            }})
async def get_articles(sort_by: Optional[str] = None,
                       order: Optional[str] = None,
                       topic: Optional[str] = None,
                       limit: Optional[str] = None,
                       p: Optional[str] = None,
                       article_service: ArticleService = Depends(get_article_service)):
    # 쿼리 값은 문자열 그대로 받아서 서비스에서 검증한다.
    articles, total_count = await article_service.list_articles(sort_by=sort_by, order=order, topic=topic,
                                                                limit=limit, p=p)
    return {"articles": articles, "total_count": total_count}


@router.post("",
             response_model=schema_article.ArticleResponse,
             status_code=status.HTTP_201_CREATED)
async def post_article(article_in: schema_article.ArticleIn,
                       article_service: ArticleService = Depends(get_article_service)):
    article = await article_service.create_article(article_in)
    return {"article": article}


@router.get("/{article_id}", response_model=schema_article.ArticleResponse)
async def get_article(article_id: ArticleId,
                      article_service: ArticleService = Depends(get_article_service)):
    article = await article_service.get_article(article_id)
    return {"article": article}


@router.patch("/{article_id}", response_model=schema_article.ArticleVotesResponse)
async def patch_article(article_id: ArticleId,
                        votes_in: VotesIn,
                        article_service: ArticleService = Depends(get_article_service)):
    article = await article_service.update_article_votes(article_id, votes_in.inc_votes)
    return {"article": article}


@router.delete("/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(article_id: ArticleId,
                         article_service: ArticleService = Depends(get_article_service)):
    await article_service.delete_article(article_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{article_id}/comments", response_model=schema_comment.CommentsResponse)
async def get_article_comments(article_id: ArticleId,
                               limit: Optional[str] = None,
                               p: Optional[str] = None,
                               comment_service: CommentService = Depends(get_comment_service)):
    comments = await comment_service.list_comments(article_id, limit=limit, p=p)
    return {"comments": comments}


@router.post("/{article_id}/comments",
             response_model=schema_comment.CommentResponse,
             status_code=status.HTTP_201_CREATED)
async def post_article_comment(article_id: ArticleId,
                               comment_in: schema_comment.CommentIn,
                               comment_service: CommentService = Depends(get_comment_service)):
    comment = await comment_service.create_comment(article_id, comment_in)
    return {"comment": comment}
