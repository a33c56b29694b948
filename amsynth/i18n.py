"""Message translation helpers."""

from __future__ import annotations

import gettext as _gettext
from pathlib import Path


class _Catalog:
    translations: _gettext.NullTranslations = _gettext.NullTranslations()


def install_translations(
    domain: str, localedir: str | Path | None
) -> _gettext.NullTranslations:
    """Load the message catalogue for a domain, falling back to untranslated text."""
    localedir = None if localedir is None else str(localedir)
    _Catalog.translations = _gettext.translation(domain, localedir, fallback=True)
    return _Catalog.translations


def gettext(msgid: str) -> str:
    """Translate a message."""
    return _Catalog.translations.gettext(msgid)


def ngettext(msgid: str, msgid_plural: str, n: int) -> str:
    """Translate a message whose form depends on a count."""
    return _Catalog.translations.ngettext(msgid, msgid_plural, n)


def pgettext(context: str, msgid: str) -> str:
    """Translate a message within a disambiguating context."""
    return _Catalog.translations.pgettext(context, msgid)


def npgettext(context: str, msgid: str, msgid_plural: str, n: int) -> str:
    """Translate a counted message within a context."""
    return _Catalog.translations.npgettext(context, msgid, msgid_plural, n)


def gettext_noop(string: str) -> str:
    """Mark a string for extraction; it is returned untranslated.

    Raises TypeError when given anything other than a string, since only
    literal text can be a message id.
    """
    if not isinstance(string, str):
        raise TypeError(f"message id must be a str, not {type(string).__name__}")
    return string