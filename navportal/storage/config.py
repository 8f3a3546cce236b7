"""Site configuration: title, subtitle, and the background image list."""

import logging
from typing import Any

from navportal import auth
from navportal.errors import Outcome
from navportal.models import PublicConfig, SiteConfig

from .core import CONFIG_KEY, get_store

logger = logging.getLogger(__name__)

_CONFIG_DEFAULTS: dict[str, Any] = {
    "title": "我的导航",
    "subtitle": "连接万物，导航无限可能",
    "backgroundImages": [],
}


def background_url(position: int) -> str:
    return f"/background-image/{position}"


async def load_site_config() -> SiteConfig:
    """Read the stored config, creating and persisting defaults if absent."""
    store = get_store()
    raw = await store.get(CONFIG_KEY)
    if raw is None:
        config = SiteConfig.model_validate(_CONFIG_DEFAULTS)
        await save_site_config(config)
        logger.info("created default site config")
        return config
    return SiteConfig.model_validate(raw)


async def save_site_config(config: SiteConfig) -> None:
    await get_store().put(CONFIG_KEY, config.model_dump(by_alias=True))


async def get_config() -> PublicConfig:
    """Config for any caller. Image payloads become position URLs."""
    config = await load_site_config()
    return PublicConfig(
        title=config.title,
        subtitle=config.subtitle,
        background_image_urls=[background_url(i) for i in range(len(config.background_images))],
    )


async def update_config(
    token: str | None,
    title: str = "",
    subtitle: str = "",
    reset_background: bool = False,
) -> Outcome:
    """Overwrite title and subtitle (admin only).

    Both fields are always written; an omitted one is stored blank.
    reset_background clears every image in the same write.
    """
    if not auth.require_admin(token):
        return Outcome.forbidden()
    config = await load_site_config()
    config.title = title
    config.subtitle = subtitle
    if reset_background:
        config.background_images = []
    await save_site_config(config)
    logger.info("updated site config (reset_background=%s)", reset_background)
    return Outcome.success()
