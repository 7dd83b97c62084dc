"""Message catalog: per-language default messages for every rule."""

import logging
import typing
from types import MappingProxyType

from .. import providers as _providers
from . import en as _en
from . import tr as _tr

logger = logging.getLogger(__name__)

MessageDictionary = typing.Mapping[str, typing.Any]

DEFAULT_LANGUAGE = "en"

CATALOG: typing.Mapping[str, MessageDictionary] = MappingProxyType(
    {
        "en": _en.MESSAGES,
        "tr": _tr.MESSAGES,
    }
)


def available_languages() -> list[str]:
    """Language codes with a registered message dictionary."""
    return list(CATALOG)


def get_messages(language: str) -> MessageDictionary:
    """Return the message dictionary for a language.

    Args:
        language: Language code (e.g. 'en', 'tr')

    Returns:
        The language's dictionary, or the default language's dictionary if
        the code is not registered
    """
    messages = CATALOG.get(language)
    if messages is None:
        logger.debug(
            "No messages for language %r, using %r", language, DEFAULT_LANGUAGE
        )
        return CATALOG[DEFAULT_LANGUAGE]
    return messages


def _entry(messages: MessageDictionary, group: str | None, key: str) -> typing.Any:
    if group is None:
        return messages.get(key)
    return messages.get(group, {}).get(key)


def catalog_message(
    language: str, group: str | None, key: str
) -> _providers.MessageProvider | None:
    """Look up the default message for one rule.

    Args:
        language: Language code
        group: Rule group ('string', 'number', 'date', 'boolean'), or None for
            general codes and field comparisons
        key: Rule key within the group

    Returns:
        The message provider, falling back to the default language when the
        requested dictionary has no entry; None if no dictionary has one
    """
    entry = _entry(get_messages(language), group, key)
    if entry is None:
        entry = _entry(CATALOG[DEFAULT_LANGUAGE], group, key)
    if entry is None:
        return None
    return _providers.as_provider(entry)
