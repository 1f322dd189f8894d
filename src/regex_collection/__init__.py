"""Fixed catalog of string format predicates.

Every predicate takes a string and returns ``True`` when it matches a known
real-world format (mainland mobile and landline numbers, ID cards, URLs,
base64 data URIs, bank card numbers, train numbers, ...).  Predicates never
raise for malformed input; ``None`` and non-string values are simply
``False``.
"""

import logging

from .rules import (
    CATALOG,
    Anchoring,
    ValidationRule,
    categories,
    get_predicate,
    get_rule,
    identify,
    is_base64,
    is_credit_card_number,
    is_hongkong_id_card,
    is_id_card,
    is_image_url,
    is_imei,
    is_macau_id_card,
    is_phone,
    is_phone_easy,
    is_taiwan_id_card,
    is_tel_phone,
    is_train_number,
    is_unified_social_credit_code,
    is_url,
    is_url_with_port,
    is_video_url,
    validate,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Anchoring",
    "ValidationRule",
    "CATALOG",
    "categories",
    "get_rule",
    "get_predicate",
    "validate",
    "identify",
    "is_train_number",
    "is_imei",
    "is_url",
    "is_url_with_port",
    "is_unified_social_credit_code",
    "is_video_url",
    "is_image_url",
    "is_base64",
    "is_credit_card_number",
    "is_id_card",
    "is_hongkong_id_card",
    "is_macau_id_card",
    "is_taiwan_id_card",
    "is_phone",
    "is_phone_easy",
    "is_tel_phone",
]
