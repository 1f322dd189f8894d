"""General purpose format checks: train numbers, device ids, links and payloads.

Each rule is a module level :class:`~regex_collection.rules.base.ValidationRule`
compiled at import time; each predicate is a thin wrapper that returns
``False`` for anything the rule does not accept, ``None`` included.

All rules are fully anchored except :data:`URL`, which only pins the start of
the input.  Anything after a valid ``host.tld`` prefix is accepted, so
``"http://baidu.com:8081"`` passes even though the port is not described by the
pattern.

The directory part of the video and image link rules is written ``.+/``
rather than the equivalent ``(.+/)+``; the nested form is exponential on long
non-matching inputs under a backtracking engine.
"""

from __future__ import annotations

from .base import Anchoring, ValidationRule

__all__ = [
    "TRAIN_NUMBER",
    "IMEI",
    "URL",
    "URL_WITH_PORT",
    "UNIFIED_SOCIAL_CREDIT_CODE",
    "VIDEO_URL",
    "IMAGE_URL",
    "BASE64",
    "CREDIT_CARD_NUMBER",
    "RULES",
    "is_train_number",
    "is_imei",
    "is_url",
    "is_url_with_port",
    "is_unified_social_credit_code",
    "is_video_url",
    "is_image_url",
    "is_base64",
    "is_credit_card_number",
]

TRAIN_NUMBER = ValidationRule(
    "train_number",
    r"[GCDZTSPKXLY1-9]\d{1,4}",
    description="Train number (G14, K1234, 1461)",
)

IMEI = ValidationRule(
    "imei",
    r"\d{15,17}",
    description="Handset IMEI, 15 to 17 digits",
)

# Labels: first char may not be a hyphen, 1-65 chars, no whitespace or !@#$%^&*?.
URL = ValidationRule(
    "url",
    r"(((ht|f)tps?)://)?([^!@#$%^&*?.\s-]([^!@#$%^&*?.\s]{0,63}[^!@#$%^&*?.\s])?\.)+[a-z]{2,6}/?",
    anchoring=Anchoring.PREFIX,
    description="Web address (prefix match)",
)

URL_WITH_PORT = ValidationRule(
    "url_with_port",
    r"((ht|f)tps?://)?[\w-]+(\.[\w-]+)+:\d{1,5}/?",
    description="Web address or IP with a mandatory port",
)

UNIFIED_SOCIAL_CREDIT_CODE = ValidationRule(
    "unified_social_credit_code",
    r"[0-9A-HJ-NPQRTUWXY]{2}\d{6}[0-9A-HJ-NPQRTUWXY]{10}",
    description="Unified social credit code (18 chars)",
)

VIDEO_URL = ValidationRule(
    "video_url",
    r"https?://.+/.+\.(swf|avi|flv|mpg|rm|mov|wav|asf|3gp|mkv|rmvb|mp4)",
    description="Video link (swf, avi, flv, mpg, rm, mov, wav, asf, 3gp, mkv, rmvb, mp4)",
)

# The extension is matched as a bare suffix, no dot required.
IMAGE_URL = ValidationRule(
    "image_url",
    r"https?://.+/.+(gif|png|jpg|jpeg|webp|svg|psd|bmp|tif)",
    description="Image link (gif, png, jpg, jpeg, webp, svg, psd, bmp, tif)",
)

# Case-sensitive: lowercase "data:" and MIME type, either case in the payload.
BASE64 = ValidationRule(
    "base64",
    (
        r"\s*data:(?:[a-z]+/[a-z0-9+.-]+(?:;[a-z-]+=[a-z0-9-]+)?)?(?:;base64)?,"
        r"([A-Za-z0-9!$&',()*+;=\-._~:@/?%\s]*?)\s*"
    ),
    description="Base64 data URI",
)

CREDIT_CARD_NUMBER = ValidationRule(
    "credit_card_number",
    r"[1-9]\d{9,29}",
    description="Bank card number, 10 to 30 digits",
)

RULES: tuple[ValidationRule, ...] = (
    TRAIN_NUMBER,
    IMEI,
    URL,
    URL_WITH_PORT,
    UNIFIED_SOCIAL_CREDIT_CODE,
    VIDEO_URL,
    IMAGE_URL,
    BASE64,
    CREDIT_CARD_NUMBER,
)


def is_train_number(text: str | None) -> bool:
    """Return whether ``text`` is a train number such as ``"G14"``.

    >>> is_train_number("G14"), is_train_number("G11234")
    (True, False)
    """

    return TRAIN_NUMBER.matches(text)


def is_imei(text: str | None) -> bool:
    """Return whether ``text`` is a 15 to 17 digit IMEI."""

    return IMEI.matches(text)


def is_url(text: str | None) -> bool:
    """Return whether ``text`` starts with a web address.

    >>> is_url("http://baidu.com:8081"), is_url("http://baidu.com/asdf/#/234-123")
    (True, True)
    """

    return URL.matches(text)


def is_url_with_port(text: str | None) -> bool:
    """Return whether ``text`` is a host (or IP) with an explicit port.

    >>> is_url_with_port("http://baidu.com:8081"), is_url_with_port("http://baidu.com")
    (True, False)
    """

    return URL_WITH_PORT.matches(text)


def is_unified_social_credit_code(text: str | None) -> bool:
    return UNIFIED_SOCIAL_CREDIT_CODE.matches(text)


def is_video_url(text: str | None) -> bool:
    """Return whether ``text`` links to a video file.

    Extensions are matched in lowercase only.

    >>> is_video_url("http://ASD.COM/asd/asd.psd"), is_video_url("http://baidu.com/ewe.mov")
    (False, True)
    """

    return VIDEO_URL.matches(text)


def is_image_url(text: str | None) -> bool:
    """Return whether ``text`` links to an image file (lowercase extensions)."""

    return IMAGE_URL.matches(text)


def is_base64(text: str | None) -> bool:
    """Return whether ``text`` is a ``data:`` URI; the payload may be empty.

    >>> is_base64("data:image/gif;base64,R0lGODlhAQABAAAAACw="), is_base64("data:,")
    (True, True)
    """

    return BASE64.matches(text)


def is_credit_card_number(text: str | None) -> bool:
    return CREDIT_CARD_NUMBER.matches(text)
