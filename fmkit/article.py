"""Front matter operations invoked by commands and save hooks."""

from __future__ import annotations

import logging

from .config import CONFIG_KEY, EXTENSION_NAME, SETTING_DATE_FORMAT, FmkitConfig
from .editor import EditorHost, SaveEvent
from .frontmatter import Article, parse_article, render_article
from .slug import slugify
from .taxonomy import TaxonomyType, build_options
from .utils.datetime_fmt import Clock, DateFormatError, stamp, utc_now

logger = logging.getLogger(__name__)


def get_front_matter(host: EditorHost) -> Article | None:
    """Parse the active document, or return ``None`` when there is nothing to edit."""

    document = host.active_document
    if document is None:
        logger.debug("No active document")
        return None

    article = parse_article(document.text)
    if article is None:
        logger.debug("Front matter of %s could not be parsed", document.path)
    return article


def update_document(host: EditorHost, article: Article, config: FmkitConfig) -> str:
    """Render ``article`` into the active document and return the new text."""

    document = host.active_document
    if document is None:
        raise RuntimeError("No active document to update")

    text = render_article(
        article,
        indent_arrays=config.indent_arrays,
        unquoted_keys=config.no_property_value_quotes,
    )
    document.replace_text(text)
    logger.debug("Updated front matter of %s", document.path)
    return text


def insert_taxonomy(host: EditorHost, config: FmkitConfig, kind: TaxonomyType) -> None:
    """Let the user pick tags or categories and store the selection."""

    article = get_front_matter(host)
    if article is None:
        return

    field_name = kind.field_name
    options = build_options(article.data.get(field_name), kind.configured(config))
    if not options:
        host.show_info(f"{EXTENSION_NAME}: No {field_name} configured.")
        return

    selected = host.pick_many(options, placeholder=f"Select your {field_name} to insert")
    if selected is None:
        logger.debug("Taxonomy selection cancelled")
        return

    article.data[field_name] = [option.label for option in selected]
    update_document(host, article, config)


def set_date(host: EditorHost, config: FmkitConfig, *, clock: Clock = utc_now) -> None:
    """Stamp the ``date`` field with the current time."""

    article = get_front_matter(host)
    if article is None:
        return

    set_article_date(host, config, article, "date", clock=clock)
    update_document(host, article, config)


def add_created_date(
    event: SaveEvent,
    host: EditorHost,
    config: FmkitConfig,
    *,
    clock: Clock = utc_now,
) -> None:
    """Fill an empty ``created`` field while the document is being saved."""

    if not config.add_created_if_empty_on_save:
        return

    article = get_front_matter(host)
    if article is None or article.data.get("created"):
        return

    set_article_date(host, config, article, "created", clock=clock)
    if config.update_modified_on_save:
        set_article_date(host, config, article, "modified", clock=clock)

    event.wait_until(update_document(host, article, config))


def update_modified_date(
    event: SaveEvent,
    host: EditorHost,
    config: FmkitConfig,
    *,
    clock: Clock = utc_now,
) -> None:
    """Refresh the ``modified`` field while the document is being saved."""

    if not config.update_modified_on_save:
        return

    article = get_front_matter(host)
    if article is None:
        return

    set_article_date(host, config, article, "modified", clock=clock)
    event.wait_until(update_document(host, article, config))


def set_article_date(
    host: EditorHost,
    config: FmkitConfig,
    article: Article,
    key: str,
    *,
    clock: Clock = utc_now,
) -> None:
    try:
        article.data[key] = stamp(config.date_format, clock=clock)
    except DateFormatError as exc:
        host.show_error(
            f"{EXTENSION_NAME}: Something failed while parsing the date format. "
            f'Check your "{CONFIG_KEY}.{SETTING_DATE_FORMAT}" setting.'
        )
        logger.error("Invalid date format %r: %s", config.date_format, exc)


def generate_slug(host: EditorHost, config: FmkitConfig) -> None:
    """Derive ``slug`` from ``title`` using the configured prefix and suffix."""

    article = get_front_matter(host)
    if article is None:
        return

    slug = slugify(article.data.get("title"))
    if not slug:
        logger.debug("No usable title to derive a slug from")
        return

    article.data["slug"] = f"{config.slug_prefix}{slug}{config.slug_suffix}"
    update_document(host, article, config)


def toggle_draft(host: EditorHost, config: FmkitConfig | None = None) -> None:
    """Flip the ``draft`` flag; a missing flag counts as ``False``."""

    article = get_front_matter(host)
    if article is None:
        return

    article.data["draft"] = not article.data.get("draft")
    update_document(host, article, config or FmkitConfig())
