"""Default options provider.

Supplies the process-wide default locale and backend when a caller omits
them. The interpreter itself never consults these defaults; only the
top-level entry points do, through resolve_options().

Python 3.13+.
"""

from collections.abc import Mapping
from typing import Any

from icumessage.locale_utils import get_system_locale
from icumessage.runtime.backend import get_shared_backend
from icumessage.runtime.options import MessageOptions

__all__ = ["default_options", "resolve_options"]


def default_options() -> MessageOptions:
    """Build options from the environment.

    Locale: ICUMESSAGE_LOCALE, else the system locale, else en_US.
    Backend: the shared BabelBackend.
    """
    return MessageOptions(locale=get_system_locale(), backend=get_shared_backend())


def resolve_options(options: MessageOptions | Mapping[str, Any] | None) -> MessageOptions:
    """Normalize caller options for an entry point.

    Args:
        options: None (use defaults), a mapping of overrides applied on top
            of the defaults, or a complete MessageOptions used as given

    Returns:
        MessageOptions for the call
    """
    if isinstance(options, MessageOptions):
        return options
    defaults = default_options()
    if options is None:
        return defaults
    return defaults.with_overrides(options)
