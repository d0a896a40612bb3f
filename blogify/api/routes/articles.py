"""
FastAPI Routes для статей.
"""

from typing import List
from fastapi import APIRouter, Depends

from blogify.api.dependencies import get_command_handler, get_current_identity, get_listing_service
from blogify.api.schemas.article_schemas import (
    ArticleCardResponse,
    CreateArticleRequest,
    SaveArticleResponse,
)
from blogify.application.composer.article_composer import ArticleComposer, ArticleForm
from blogify.application.handlers.article_command_handler import ArticleCommandHandler
from blogify.application.services.listing_service import ListingService
from blogify.domain.entities.identity import Identity

router = APIRouter(prefix="/articles", tags=["articles"])


@router.get("/latest", response_model=List[ArticleCardResponse])
async def latest_articles(service: ListingService = Depends(get_listing_service)):
    """Последние опубликованные статьи."""
    articles = await service.latest()
    return [ArticleCardResponse.from_entity(a) for a in articles]


@router.get("/trending", response_model=List[ArticleCardResponse])
async def trending_articles(service: ListingService = Depends(get_listing_service)):
    """Популярные опубликованные статьи."""
    articles = await service.trending()
    return [ArticleCardResponse.from_entity(a) for a in articles]


@router.post("", response_model=SaveArticleResponse, status_code=201)
async def create_article(
    request: CreateArticleRequest,
    identity: Identity = Depends(get_current_identity),
    handler: ArticleCommandHandler = Depends(get_command_handler),
):
    """Сохранить статью черновиком или отправить на модерацию."""
    composer = ArticleComposer(
        handler,
        identity,
        form=ArticleForm(
            title=request.title,
            excerpt=request.excerpt or "",
            body=request.content,
            featured_image=request.featured_image or "",
        ),
    )
    for tag in request.tags:
        composer.add_tag(tag)

    outcome = await composer.save(request.status)
    return SaveArticleResponse.from_outcome(outcome)
