import contextlib
import functools
import logging
from datetime import timedelta
from typing import Any, AsyncIterator, Awaitable, Callable

from databases import Database
from jinja2 import Environment, FileSystemLoader, select_autoescape
from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.middleware import Middleware
from starlette.middleware.sessions import SessionMiddleware
from starlette.requests import Request
from starlette.responses import HTMLResponse, RedirectResponse
from starlette.routing import Mount, Route
from starlette.staticfiles import StaticFiles

from app import config
from app.builder import DataAccess, build_session
from app.html.base import UnknownAction
from app.html.recipe_detail import RecipeDetail
from app.sessions import SessionRegistry, UISession
from domain.edamam import EdamamRecipeSource
from domain.errors import RecipeNotFound, RecipeSourceError
from domain.repository import (
    RecipesRepository,
    ReviewsRepository,
    SavedRecipesRepository,
    UsersRepository,
    create_tables,
)


logger = logging.getLogger(__name__)


CONFIG = config.Config()


def aHTMLResponse(route: Callable[..., Awaitable[str | tuple[str, int]]]):
    @functools.wraps(route)
    async def wrapper(*args: Any, **kwargs: Any) -> HTMLResponse:
        resp = await route(*args, **kwargs)
        if not isinstance(resp, tuple):
            html, code = resp, 200
        else:
            html, code = resp
        return HTMLResponse(html, status_code=code)

    return wrapper


def templates_for(cfg: config.Config) -> Environment:
    return Environment(
        loader=FileSystemLoader(cfg.html_dir),
        autoescape=select_autoescape(),
    )


def current_session(request: Request) -> UISession:
    registry: SessionRegistry = request.app.state.sessions
    session = registry.get_or_create(request.session.get("sid"))
    request.session["sid"] = session.id
    return session


@aHTMLResponse
async def homepage(request: Request) -> str:
    return current_session(request).view_manager.render()


async def view_action(request: Request) -> RedirectResponse:
    slug = request.path_params["view"]
    action = request.path_params["action"]
    session = current_session(request)
    view = session.view_manager.view_for(slug)
    if view is None:
        raise HTTPException(404, f"No view called {slug}.")

    if view is not session.view_manager.active_view:
        logger.info("Ignoring %s on %s, it is not showing", action, view.view_name)
        return RedirectResponse("/", status_code=303)

    async with request.form() as form:
        fields = {k: v for k, v in form.items() if isinstance(v, str)}
    try:
        await view.act(action, fields)
    except UnknownAction as e:
        raise HTTPException(404, f"Unknown action {action}.") from e
    return RedirectResponse("/", status_code=303)


@aHTMLResponse
async def recipe_detail(request: Request) -> str:
    id = request.path_params["id"]
    data: DataAccess = request.app.state.data
    recipe = await data.recipes.get(id)
    reviews = await data.reviews.for_recipe(recipe.id)
    return RecipeDetail(
        recipe, reviews, environment=request.app.state.templates
    ).render()


def error_page(request: Request, message: str, status_code: int) -> HTMLResponse:
    templates: Environment = request.app.state.templates
    html = templates.get_template("error.html").render(
        message=message, status_code=status_code
    )
    return HTMLResponse(html, status_code=status_code)


async def recipe_not_found(request: Request, exc: Exception) -> HTMLResponse:
    return error_page(request, "Recipe not found.", 404)


async def recipe_source_error(request: Request, exc: Exception) -> HTMLResponse:
    logger.error("Recipe source failed: %s", exc)
    return error_page(request, "The recipe source is unavailable right now.", 503)


async def http_error(request: Request, exc: Exception) -> HTMLResponse:
    assert isinstance(exc, HTTPException)
    return error_page(request, exc.detail, exc.status_code)


def create_app(cfg: config.Config | None = None) -> Starlette:
    cfg = CONFIG if cfg is None else cfg
    db = Database(cfg.db_url)
    templates = templates_for(cfg)

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        await db.connect()
        await create_tables(db)

        recipes = RecipesRepository(db, limit=cfg.search_limit)
        if cfg.seed_file is not None and cfg.seed_file.exists():
            await recipes.load(cfg.seed_file)

        edamam: EdamamRecipeSource | None = None
        if cfg.recipe_source == config.RecipeSource.edamam:
            edamam = EdamamRecipeSource(
                cache=recipes,
                app_id=cfg.edamam_app_id,
                app_key=cfg.edamam_app_key,
                limit=cfg.search_limit,
            )
        source = recipes if edamam is None else edamam
        data = DataAccess(
            users=UsersRepository(db),
            recipes=source,
            recipe_search=source,
            saved_recipes=SavedRecipesRepository(db),
            reviews=ReviewsRepository(db),
        )
        app.state.data = data
        app.state.sessions = SessionRegistry(
            lambda: build_session(data, environment=templates),
            ttl=timedelta(minutes=cfg.session_ttl_minutes),
        )
        logger.info("Searching recipes with the %s source", cfg.recipe_source.value)
        yield
        if edamam is not None:
            await edamam.aclose()
        await db.disconnect()

    app = Starlette(
        debug=True if cfg.env == config.Env.local else False,
        routes=[
            Route("/", homepage),
            Route("/views/{view}/{action}", view_action, methods=["POST"]),
            Route("/recipes/{id}", recipe_detail),
            Mount("/assets", StaticFiles(directory=cfg.assets_dir), name="assets"),
        ],
        middleware=[
            Middleware(SessionMiddleware, secret_key=cfg.secret_key),
        ],
        exception_handlers={
            RecipeNotFound: recipe_not_found,
            RecipeSourceError: recipe_source_error,
            HTTPException: http_error,
        },
        lifespan=lifespan,
    )
    app.state.templates = templates
    return app


app = create_app()
