"""Validation rules grouped by domain, plus the catalog that indexes them."""

from .base import Anchoring, ValidationRule
from .catalog import CATALOG, categories, get_predicate, get_rule, identify, validate
from .common import (
    is_base64,
    is_credit_card_number,
    is_image_url,
    is_imei,
    is_train_number,
    is_unified_social_credit_code,
    is_url,
    is_url_with_port,
    is_video_url,
)
from .id_card import is_hongkong_id_card, is_id_card, is_macau_id_card, is_taiwan_id_card
from .phone import is_phone, is_phone_easy, is_tel_phone

__all__ = [
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
