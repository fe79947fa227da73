# Copyright © SixtyFPS GmbH <info@slint.dev>
# SPDX-License-Identifier: GPL-3.0-only OR LicenseRef-Slint-Royalty-free-2.0 OR LicenseRef-Slint-Software-3.0

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Iterable

import aiohttp

from .models import ComponentUrlPath, RefreshConfig

logger = logging.getLogger(__name__)


async def download_and_save_html(
    session: aiohttp.ClientSession,
    base_url: str,
    cache_folder: Path,
    component_url: ComponentUrlPath,
) -> Path:
    url = base_url + component_url.url
    logger.debug("Downloading %s", url)
    async with session.get(url, raise_for_status=True) as response:
        html = await response.text()

    cache_folder.mkdir(parents=True, exist_ok=True)
    file_name = cache_folder / f"{component_url.name}.html"
    file_name.write_text(html, encoding="utf-8")
    return file_name


async def refresh(
    base_url: str,
    cache_folder: Path,
    component_urls: Iterable[ComponentUrlPath],
    *,
    config: RefreshConfig | None = None,
) -> list[Path]:
    """Download every page into ``cache_folder`` concurrently.

    The first failing download cancels the others and its exception is
    re-raised. Nothing is retried.
    """
    config = config or RefreshConfig()
    urls = list(component_urls)
    if not urls:
        return []

    timeout = aiohttp.ClientTimeout(total=config.timeout)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        tasks = [
            asyncio.create_task(
                download_and_save_html(session, base_url, cache_folder, url)
            )
            for url in urls
        ]
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)

        failed = next((task for task in tasks if task in done and task.exception()), None)
        if failed is not None:
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)
            index = tasks.index(failed)
            logger.warning("Download of %r failed", urls[index].name)
            raise failed.exception()  # type: ignore[misc]

        return [task.result() for task in tasks]


def refresh_blocking(
    base_url: str,
    cache_folder: Path,
    component_urls: Iterable[ComponentUrlPath],
    *,
    config: RefreshConfig | None = None,
) -> list[Path]:
    return asyncio.run(refresh(base_url, cache_folder, component_urls, config=config))


__all__ = ["download_and_save_html", "refresh", "refresh_blocking"]
