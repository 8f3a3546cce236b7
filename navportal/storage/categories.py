"""Category tree storage: defaults, privacy projection, whole-tree replace.

The tree is one document under the `categories` key. Reads create the
built-in default tree on first access. Writes replace the whole tree; there
are no per-category updates.

Ordering: a category's `order` is never taken from the caller. On every
write it is rewritten as position + 1, and reads sort on it (stable, so ties
keep stored order). Subcategory and link order is plain list position.

Privacy: for the public role, private categories are dropped entirely and
private subcategories are dropped from public categories. Guest and admin
see the stored tree. Filtering only shapes the returned copy.

Ids: entities submitted without an id get `cat_/sub_/link_<ms>` ids. Ids that
collide with existing ones are stored as given (the submitted tree wins).
"""

import logging
import time
from typing import Any

from navportal import auth
from navportal.errors import Outcome
from navportal.models import Category, Link, Role, Subcategory

from .core import CATEGORIES_KEY, get_store

logger = logging.getLogger(__name__)

_last_id_ms = 0

_DEFAULT_CATEGORIES: list[dict[str, Any]] = [
    {"id": "cat_1", "name": "常用工具", "icon": "globe", "isPrivate": False, "order": 1,
     "subcategories": [], "links": [
        {"id": "link_101", "name": "Google", "url": "https://www.google.com",
         "icon": "fab fa-google", "description": "全球最大的搜索引擎"},
        {"id": "link_102", "name": "YouTube", "url": "https://www.youtube.com",
         "icon": "fab fa-youtube", "description": "全球最大的视频分享网站"},
        {"id": "link_103", "name": "百度", "url": "https://www.baidu.com",
         "icon": "fas fa-search", "description": "中文搜索引擎"},
        {"id": "link_104", "name": "GitHub", "url": "https://github.com",
         "icon": "fab fa-github", "description": "代码托管与协作平台"},
    ]},
    {"id": "cat_2", "name": "AI 助手", "icon": "robot", "isPrivate": False, "order": 2,
     "subcategories": [], "links": [
        {"id": "link_201", "name": "Claude", "url": "https://claude.ai",
         "icon": "fas fa-brain", "description": "Anthropic 开发的AI助手"},
        {"id": "link_202", "name": "Kimi", "url": "https://kimi.moonshot.cn/",
         "icon": "fas fa-rocket", "description": "Moonshot AI 长文本智能助手"},
        {"id": "link_203", "name": "Gemini", "url": "https://gemini.google.com",
         "icon": "fas fa-gem", "description": "Google 出品的多模态AI模型"},
        {"id": "link_204", "name": "ChatGPT", "url": "https://chat.openai.com",
         "icon": "fas fa-comments", "description": "OpenAI 旗下对话式AI"},
    ]},
    {"id": "cat_3", "name": "秘密收藏", "icon": "lock", "isPrivate": True, "order": 3,
     "subcategories": [
        {"id": "sub_1", "name": "个人项目", "isPrivate": True, "links": [
            {"id": "link_301", "name": "Cloudflare", "url": "https://dash.cloudflare.com/",
             "icon": "fas fa-cloud", "description": "全球网络安全与性能服务"},
        ]},
     ], "links": []},
]


def new_id(prefix: str) -> str:
    """Timestamp id, strictly increasing within this process."""
    global _last_id_ms
    _last_id_ms = max(int(time.time() * 1000), _last_id_ms + 1)
    return f"{prefix}_{_last_id_ms}"


def new_category(name: str, icon: str = "folder", is_private: bool = False) -> Category:
    return Category(id=new_id("cat"), name=name, icon=icon, is_private=is_private)


def new_subcategory(name: str, is_private: bool = False) -> Subcategory:
    return Subcategory(id=new_id("sub"), name=name, is_private=is_private)


def new_link(name: str = "", url: str = "", icon: str = "", description: str = "") -> Link:
    return Link(id=new_id("link"), name=name, url=url, icon=icon, description=description)


def default_categories() -> list[Category]:
    return [Category.model_validate(c) for c in _DEFAULT_CATEGORIES]


def _dump(categories: list[Category]) -> list[dict[str, Any]]:
    return [c.model_dump(by_alias=True) for c in categories]


async def _load() -> list[Category]:
    store = get_store()
    raw = await store.get(CATEGORIES_KEY)
    if raw is None:
        categories = default_categories()
        await store.put(CATEGORIES_KEY, _dump(categories))
        logger.info("created default category tree")
        return categories
    return [Category.model_validate(c) for c in raw]


def filter_for_role(categories: list[Category], role: Role) -> list[Category]:
    """Drop what `role` may not see. Returns new objects for public."""
    if role is not Role.PUBLIC:
        return list(categories)
    visible = []
    for cat in categories:
        if cat.is_private:
            continue
        subs = [s for s in cat.subcategories if not s.is_private]
        visible.append(cat.model_copy(update={"subcategories": subs}))
    return visible


async def get_tree(role: Role) -> list[Category]:
    """Load the tree as `role` sees it, sorted by order."""
    categories = filter_for_role(await _load(), role)
    return sorted(categories, key=lambda c: c.order)


def _assign_ids(category: Category) -> None:
    if not category.id:
        category.id = new_id("cat")
    for link in category.links:
        if not link.id:
            link.id = new_id("link")
    for sub in category.subcategories:
        if not sub.id:
            sub.id = new_id("sub")
        for link in sub.links:
            if not link.id:
                link.id = new_id("link")


async def replace_tree(token: str | None, categories: list[Category]) -> Outcome:
    """Persist `categories` as the whole tree. Admin only.

    Order is rewritten from position; the value of the outcome is the tree
    as stored.
    """
    if not auth.require_admin(token):
        return Outcome.forbidden()
    stored = []
    for position, cat in enumerate(categories):
        cat = cat.model_copy(deep=True)
        _assign_ids(cat)
        cat.order = position + 1
        stored.append(cat)
    await get_store().put(CATEGORIES_KEY, _dump(stored))
    logger.info("saved category tree (%d categories)", len(stored))
    return Outcome.success(stored)
