"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import typing as typ

from .models import NavEntryConfig, SiteConfigError, ThemeConfig

NEW_WINDOW_TARGETS = frozenset({"_blank", "blank", "new"})


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _as_bool(value: object, *, default: bool) -> bool:
    """Interpret YAML truthy values, keeping ``default`` for missing keys."""
    match value:
        case None:
            return default
        case bool():
            return value
        case str() as text:
            return text.strip().lower() in {"1", "true", "yes", "on"}
        case _:
            return bool(value)


def _string_tuple(value: str | list[object] | None, *, field: str) -> tuple[str, ...]:
    """Normalize a scalar or list of scalars into a tuple of non-empty strings."""
    match value:
        case None:
            return ()
        case str() as text:
            return (text.strip(),) if text.strip() else ()
        case list() as items:
            normalized: list[str] = []
            for item in items:
                text = _optional_str(item)
                if text:
                    normalized.append(text)
            return tuple(normalized)
        case _:
            msg = f"'{field}' must be a string or a list of strings."
            raise SiteConfigError(msg)


def _normalize_extension(value: str) -> str:
    """Return an extension in ``.ext`` form, lower-cased."""
    text = value.strip().lower()
    return text if text.startswith(".") else f".{text}"


def _build_nav_entry(payload: object, *, where: str) -> NavEntryConfig:
    """Build one navigation declaration from a string or mapping payload."""
    match payload:
        case str() as href:
            return NavEntryConfig(label=None, href=href.strip())
        case dict() as data:
            pass
        case _:
            msg = f"Navigation entries in '{where}' must be strings or mappings."
            raise SiteConfigError(msg)

    label = _optional_str(data.get("text") or data.get("title") or data.get("label"))
    href = _optional_str(data.get("href"))
    children = _build_nav_entries(
        data.get("contents", data.get("children")), where=where
    )
    icon = _optional_str(data.get("icon"))
    if not (href or children):
        msg = f"Navigation entry '{label or '?'}' in '{where}' needs 'href' or 'contents'."
        raise SiteConfigError(msg)
    if label is None and href is None:
        msg = f"Navigation container in '{where}' needs a 'text' label."
        raise SiteConfigError(msg)
    if label is None and icon is None and href and "://" in href:
        msg = f"External navigation link '{href}' in '{where}' needs 'text' or 'icon'."
        raise SiteConfigError(msg)
    target = _optional_str(data.get("target"))
    return NavEntryConfig(
        label=label,
        href=href,
        icon=icon,
        new_window=bool(target and target.lower() in NEW_WINDOW_TARGETS),
        children=children,
    )


def _build_nav_entries(payload: object, *, where: str) -> tuple[NavEntryConfig, ...]:
    """Build an ordered tuple of navigation declarations."""
    match payload:
        case None:
            return ()
        case list() as items:
            return tuple(_build_nav_entry(item, where=where) for item in items)
        case _:
            msg = f"'{where}' must be a list of navigation entries."
            raise SiteConfigError(msg)


def _build_theme_config(payload: typ.Mapping[str, typ.Any]) -> ThemeConfig:
    """Build a ThemeConfig instance from the provided mapping payload."""
    base = ThemeConfig()
    return ThemeConfig(
        name=str(payload.get("name", base.name)),
        stylesheets=_string_tuple(payload.get("stylesheets"), field="theme.stylesheets"),
        pygments_style=str(payload.get("pygments_style", base.pygments_style)),
        toc=_as_bool(payload.get("toc"), default=base.toc),
        anchor_sections=_as_bool(
            payload.get("anchor_sections"), default=base.anchor_sections
        ),
        external_links_new_window=_as_bool(
            payload.get("external_links_new_window"),
            default=base.external_links_new_window,
        ),
        external_link_icon=_as_bool(
            payload.get("external_link_icon"), default=base.external_link_icon
        ),
    )


def _mapping(raw: typ.Mapping[str, typ.Any], key: str) -> dict[str, typ.Any]:
    """Return ``raw[key]`` as a dict, treating a missing/empty block as ``{}``."""
    value = raw.get(key)
    match value:
        case None:
            return {}
        case dict():
            return dict(value)
        case _:
            msg = f"'{key}' must be a mapping."
            raise SiteConfigError(msg)


__all__ = [
    "NEW_WINDOW_TARGETS",
    "_as_bool",
    "_build_nav_entries",
    "_build_nav_entry",
    "_build_theme_config",
    "_mapping",
    "_normalize_extension",
    "_optional_str",
    "_string_tuple",
]
