"""Translatable user-facing labels."""

import gettext
from dataclasses import dataclass

TEXT_DOMAIN = "try"


@dataclass(frozen=True)
class Labels:
    """Already-localized strings consumed by the banner and the verbose echo."""

    success: str = "Success:"
    failed: str = "Failed (status={status}):"
    echo_prefix: str = "try:"


def load_labels(localedir: str | None = None) -> Labels:
    """Resolve labels for the user's locale, falling back to English."""
    translation = gettext.translation(TEXT_DOMAIN, localedir=localedir, fallback=True)
    _ = translation.gettext
    return Labels(
        success=_("Success:"),
        failed=_("Failed (status={status}):"),
    )
