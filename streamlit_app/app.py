# -*- coding: utf-8 -*-
"""
Blogify — Streamlit views.

- Главная: популярные и последние опубликованные статьи
- Редактор: новая статья в markdown, черновик или на модерацию
- Кабинет: итоги и статьи автора по вкладкам статусов
"""

import asyncio
import html
from typing import Any, Awaitable, List

import plotly.express as px
import streamlit as st

from blogify.application.cache.query_cache import QueryCache
from blogify.application.composer.article_composer import ArticleComposer, ArticleForm, SaveOutcome
from blogify.application.handlers.article_command_handler import ArticleCommandHandler
from blogify.application.services.dashboard_service import ALL_TAB, DashboardService, DashboardView
from blogify.application.services.listing_service import ListingService
from blogify.domain.entities.article import Article
from blogify.domain.entities.identity import AuthState
from blogify.domain.value_objects.article_status import ArticleStatus
from blogify.domain.value_objects.tag_set import TagSet
from blogify.infrastructure.backend.factory import open_data_client
from blogify.infrastructure.backend.supabase_auth import SupabaseAuthClient
from blogify.infrastructure.config.logging_config import setup_logging
from blogify.infrastructure.config.settings import get_settings
from blogify.infrastructure.persistence.article_repository_impl import (
    ArticleRepositoryImpl,
    ProfileRepositoryImpl,
)
from blogify.shared.exceptions.domain_exceptions import DomainException
from blogify.shared.exceptions.infrastructure_exceptions import BackendError
from blogify.shared.utils.time_ago import time_ago

settings = get_settings()
setup_logging(settings.log_level)

# =============================================================================
# Page config
# =============================================================================

st.set_page_config(
    page_title=settings.app_name,
    page_icon="📝",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown("""
<style>
    .block-container { padding-top: 1.5rem; }
    div[data-testid="stMetric"] {
        background: #f8f9fa; border-radius: 8px;
        padding: 12px 16px; border-left: 4px solid #4e8cff;
    }
    .card-excerpt { color: #555; font-size: 0.92em; }
    .card-meta { color: #777; font-size: 0.85em; }
</style>
""", unsafe_allow_html=True)

FORM_KEYS = ["form_title", "form_excerpt", "form_featured_image", "form_body", "form_tag"]


def esc(val: Any) -> str:
    """HTML-escape a value for safe rendering."""
    return html.escape(str(val)) if val else ""


def run(coro: Awaitable[Any]) -> Any:
    return asyncio.run(coro)


# =============================================================================
# Session state
# =============================================================================

def auth_state() -> AuthState:
    return st.session_state.get("auth", AuthState())


def query_cache() -> QueryCache:
    # Кэш на сессию браузера: у каждой сессии Streamlit свой поток и event loop
    if "query_cache" not in st.session_state:
        st.session_state["query_cache"] = QueryCache(stale_seconds=settings.query_stale_seconds)
    return st.session_state["query_cache"]


def tag_set() -> TagSet:
    if "tags" not in st.session_state:
        st.session_state["tags"] = TagSet()
    return st.session_state["tags"]


def flash(message: str) -> None:
    st.session_state["flash"] = message


def go(page: str) -> None:
    st.session_state["nav_page"] = page


# =============================================================================
# Data access
# =============================================================================

async def load_listings():
    async with open_data_client(settings) as client:
        service = ListingService(
            ArticleRepositoryImpl(client, settings.articles_table),
            query_cache(),
        )
        return await asyncio.gather(service.trending(), service.latest(), return_exceptions=True)


async def load_dashboard(token: str, state: AuthState) -> DashboardView:
    async with open_data_client(settings, access_token=token) as client:
        service = DashboardService(
            ArticleRepositoryImpl(client, settings.articles_table),
            ProfileRepositoryImpl(client, settings.profiles_table),
            query_cache(),
        )
        return await service.load(state.require_identity())


async def save_article(token: str, state: AuthState, form: ArticleForm, status: ArticleStatus) -> SaveOutcome:
    async with open_data_client(settings, access_token=token) as client:
        handler = ArticleCommandHandler(
            ArticleRepositoryImpl(client, settings.articles_table),
            query_cache(),
        )
        composer = ArticleComposer(handler, state.require_identity(), form=form, tags=tag_set())
        return await composer.save(status)


async def sign_in(email: str, password: str):
    async with SupabaseAuthClient(settings) as auth:
        return await auth.sign_in(email, password)


# =============================================================================
# Cards
# =============================================================================

def status_badge(status: ArticleStatus) -> str:
    return f":{status.badge_color}-background[{status.value}]"


def counters_line(article: Article) -> str:
    return f"❤️ {article.likes_count} · 💬 {article.comments_count} · 👁 {article.views_count}"


def render_card(article: Article) -> None:
    """Карточка статьи в ленте."""
    with st.container(border=True):
        if article.featured_image:
            st.image(article.featured_image)
        st.markdown(
            f'<div class="card-meta">Author · {esc(time_ago(article.created_at))}</div>',
            unsafe_allow_html=True,
        )
        st.subheader(article.title)
        if article.excerpt:
            st.markdown(f'<div class="card-excerpt">{esc(article.excerpt)}</div>', unsafe_allow_html=True)
        tags = " ".join(f"`{t}`" for t in article.tags[:3])
        st.markdown(f"{tags}  \n{counters_line(article)}")


def render_row(article: Article, show_counters: bool = True) -> None:
    """Строка статьи в кабинете."""
    with st.container(border=True):
        st.markdown(f"{status_badge(article.status)} · {time_ago(article.created_at)}")
        st.markdown(f"**{article.title}**")
        if article.excerpt:
            st.caption(article.excerpt)
        if show_counters:
            st.markdown(counters_line(article))


def render_grid(articles: List[Article], columns: int = 3) -> None:
    cols = st.columns(columns)
    for i, article in enumerate(articles):
        with cols[i % columns]:
            render_card(article)


# =============================================================================
# Pages
# =============================================================================

def page_home() -> None:
    st.title(f"Welcome to {settings.app_name}")
    st.write("A platform where developers share knowledge, insights, and innovative ideas.")

    with st.spinner("Loading articles..."):
        trending, latest = run(load_listings())

    st.header("Trending Articles")
    if isinstance(trending, BaseException):
        st.error(f"Could not load trending articles: {trending}")
    else:
        render_grid(trending)

    st.header("Latest Articles")
    if isinstance(latest, BaseException):
        st.error(f"Could not load latest articles: {latest}")
    elif not latest:
        st.info("No articles published yet.")
    else:
        render_grid(latest)


def _add_tag() -> None:
    if tag_set().add(st.session_state.get("form_tag", "")):
        st.session_state["form_tag"] = ""


def _remove_tag(tag: str) -> None:
    tag_set().remove(tag)


def _handle_save(status: ArticleStatus) -> None:
    state = auth_state()
    form = ArticleForm(
        title=st.session_state.get("form_title", ""),
        excerpt=st.session_state.get("form_excerpt", ""),
        body=st.session_state.get("form_body", ""),
        featured_image=st.session_state.get("form_featured_image", ""),
    )
    try:
        outcome = run(save_article(st.session_state.get("token", ""), state, form, status))
    except BackendError as e:
        st.session_state["save_error"] = e.message
        return
    except DomainException as e:
        st.session_state["save_error"] = str(e)
        return

    for key in FORM_KEYS:
        st.session_state.pop(key, None)
    st.session_state["tags"] = TagSet()
    st.session_state.pop("save_error", None)
    flash(outcome.message)
    go("Dashboard")


def page_write() -> None:
    st.title("Create Article")
    st.caption("Share your knowledge with the community")

    error = st.session_state.pop("save_error", None)
    if error:
        st.error(error)

    st.text_input("Title *", key="form_title", placeholder="Enter a compelling title")
    st.text_input("Excerpt", key="form_excerpt", placeholder="Brief description of your article (optional)")
    st.text_input(
        "Featured Image URL",
        key="form_featured_image",
        placeholder="https://example.com/image.jpg (optional)",
    )

    col_tag, col_add = st.columns([4, 1])
    with col_tag:
        st.text_input("Tags", key="form_tag", placeholder="Add a tag")
    with col_add:
        st.write("")
        st.button("Add", on_click=_add_tag)
    if len(tag_set()):
        tag_cols = st.columns(min(len(tag_set()), 6))
        for i, tag in enumerate(tag_set()):
            with tag_cols[i % len(tag_cols)]:
                st.button(f"{tag} ✕", key=f"rm_tag_{tag}", on_click=_remove_tag, args=(tag,))

    write_tab, preview_tab = st.tabs(["Write", "Preview"])
    with write_tab:
        st.text_area(
            "Content *",
            key="form_body",
            height=400,
            placeholder="Write your article using Markdown...",
        )
    with preview_tab:
        st.markdown(st.session_state.get("form_body", "") or "_Nothing to preview_")

    col_cancel, col_draft, col_submit = st.columns(3)
    with col_cancel:
        st.button("Cancel", on_click=go, args=("Dashboard",))
    with col_draft:
        st.button("💾 Save Draft", on_click=_handle_save, args=(ArticleStatus.DRAFT,))
    with col_submit:
        st.button("📤 Submit for Review", type="primary", on_click=_handle_save, args=(ArticleStatus.PENDING,))


def page_dashboard() -> None:
    state = auth_state()
    with st.spinner("Loading dashboard..."):
        view = run(load_dashboard(st.session_state.get("token", ""), state))

    st.title("Dashboard")
    st.caption(f"Welcome back, {view.greeting_name}")

    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Articles", view.article_count)
    c2.metric("Total Likes", view.totals.likes)
    c3.metric("Total Views", view.totals.views)
    c4.metric("Total Comments", view.totals.comments)

    if view.error:
        st.error(f"Could not load your articles: {view.error}")
        return

    if view.articles:
        counts = {status.tab_label: len(view.partitions[status]) for status in ArticleStatus}
        fig = px.bar(x=list(counts), y=list(counts.values()), labels={"x": "Status", "y": "Articles"})
        fig.update_layout(height=260, margin=dict(l=10, r=10, t=10, b=10))
        st.plotly_chart(fig)

    names = view.tabs()
    labels = [
        f"All ({view.article_count})" if name == ALL_TAB
        else f"{ArticleStatus(name).tab_label} ({len(view.tab(name))})"
        for name in names
    ]
    for name, tab in zip(names, st.tabs(labels)):
        with tab:
            articles = view.tab(name)
            if name == ALL_TAB and view.is_empty:
                st.info("No articles yet. Start writing your first article to share with the community.")
                st.button("Write Your First Article", on_click=go, args=("Write",))
                continue
            for article in articles:
                render_row(article, show_counters=name in (ALL_TAB, ArticleStatus.APPROVED.value))


# =============================================================================
# Sidebar: auth + navigation
# =============================================================================

def sidebar_auth() -> None:
    state = auth_state()
    if state.is_authenticated:
        st.sidebar.caption(f"Signed in as {state.identity.handle}")
        if st.sidebar.button("Sign out"):
            for key in ("auth", "token", "query_cache", "tags"):
                st.session_state.pop(key, None)
            go("Home")
            st.rerun()
        return

    with st.sidebar.form("sign_in"):
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Sign in")
    if submitted:
        st.session_state["auth"] = AuthState(loading=True)
        try:
            identity, token = run(sign_in(email, password))
        except BackendError as e:
            st.session_state["auth"] = AuthState()
            st.sidebar.error(e.message)
            return
        st.session_state["auth"] = AuthState(identity=identity)
        st.session_state["token"] = token
        st.rerun()


PAGES = {
    "Home": (page_home, False),
    "Write": (page_write, True),
    "Dashboard": (page_dashboard, True),
}

if "nav_page" not in st.session_state:
    st.session_state["nav_page"] = "Home"

st.sidebar.title(f"📝 {settings.app_name}")
sidebar_auth()
st.sidebar.radio("Navigation", list(PAGES), key="nav_page")

message = st.session_state.pop("flash", None)
if message:
    st.success(message)

render, protected = PAGES[st.session_state["nav_page"]]
if protected and auth_state().should_redirect:
    st.info("Sign in to continue.")
    page_home()
elif protected and auth_state().loading:
    st.info("Checking session...")
else:
    render()
