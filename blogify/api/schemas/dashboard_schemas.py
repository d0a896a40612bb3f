"""
Pydantic schemas для кабинета.
"""

from typing import List, Optional
from pydantic import BaseModel

from blogify.api.schemas.article_schemas import ArticleCardResponse
from blogify.application.services.dashboard_service import ALL_TAB, DashboardView
from blogify.domain.value_objects.article_status import ArticleStatus


class TotalsResponse(BaseModel):
    likes: int
    views: int
    comments: int


class DashboardTabResponse(BaseModel):
    name: str
    label: str
    count: int
    articles: List[ArticleCardResponse]


class DashboardResponse(BaseModel):
    """Кабинет автора."""

    greeting_name: str
    article_count: int
    totals: TotalsResponse
    tabs: List[DashboardTabResponse]
    error: Optional[str] = None

    @classmethod
    def from_view(cls, view: DashboardView) -> "DashboardResponse":
        tabs = []
        for name in view.tabs():
            articles = view.tab(name)
            label = "All" if name == ALL_TAB else ArticleStatus(name).tab_label
            tabs.append(
                DashboardTabResponse(
                    name=name,
                    label=label,
                    count=len(articles),
                    articles=[ArticleCardResponse.from_entity(a) for a in articles],
                )
            )
        return cls(
            greeting_name=view.greeting_name,
            article_count=view.article_count,
            totals=TotalsResponse(
                likes=view.totals.likes,
                views=view.totals.views,
                comments=view.totals.comments,
            ),
            tabs=tabs,
            error=view.error,
        )
