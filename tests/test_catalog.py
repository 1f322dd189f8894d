from concurrent.futures import ThreadPoolExecutor

import pytest

import regex_collection
from regex_collection.rules.base import Anchoring, ValidationRule
from regex_collection.rules.catalog import (
    CATALOG,
    build_catalog,
    categories,
    get_predicate,
    get_rule,
    identify,
    validate,
)
from regex_collection.utils.errors import PatternDefinitionError, UnknownCategoryError

EXPECTED = {
    "train_number",
    "imei",
    "url",
    "url_with_port",
    "unified_social_credit_code",
    "video_url",
    "image_url",
    "base64",
    "credit_card_number",
    "id_card",
    "hongkong_id_card",
    "macau_id_card",
    "taiwan_id_card",
    "phone",
    "phone_easy",
    "tel_phone",
}


def test_catalog_contents() -> None:
    assert set(CATALOG) == EXPECTED
    assert categories() == tuple(sorted(EXPECTED))


def test_every_category_has_a_top_level_predicate() -> None:
    for name in EXPECTED:
        predicate = getattr(regex_collection, f"is_{name}")
        assert predicate("") is False


def test_only_url_is_prefix_anchored() -> None:
    prefix = {name for name, rule in CATALOG.items() if rule.anchoring is Anchoring.PREFIX}
    assert prefix == {"url"}


def test_catalog_is_read_only() -> None:
    with pytest.raises(TypeError):
        CATALOG["extra"] = ValidationRule("extra", r"x")  # type: ignore[index]


@pytest.mark.parametrize("name", sorted(EXPECTED))
def test_empty_string_rejected(name: str) -> None:
    assert validate(name, "") is False


@pytest.mark.parametrize("name", sorted(EXPECTED))
def test_none_rejected(name: str) -> None:
    assert get_predicate(name)(None) is False


def test_empty_data_uri_is_only_base64() -> None:
    assert identify("data:,") == ["base64"]


def test_identify_mobile_number() -> None:
    assert identify("18328073000") == ["credit_card_number", "phone", "phone_easy"]


def test_identify_with_subset() -> None:
    assert identify("18328073000", ["phone", "tel_phone"]) == ["phone"]
    assert identify("nothing", ["phone"]) == []


def test_identify_unknown_subset_raises() -> None:
    with pytest.raises(UnknownCategoryError):
        identify("18328073000", ["mobile"])


def test_get_rule_unknown() -> None:
    with pytest.raises(UnknownCategoryError) as info:
        get_rule("does_not_exist")
    assert "does_not_exist" in str(info.value)


def test_validate_dispatches() -> None:
    assert validate("train_number", "G14")
    assert not validate("train_number", "G11234")


def test_build_catalog_rejects_duplicates() -> None:
    rule = ValidationRule("dup", r"\d")
    with pytest.raises(PatternDefinitionError):
        build_catalog([rule, ValidationRule("dup", r"\w")])


def test_idempotent_across_calls_and_threads() -> None:
    samples = ["18328073000", "G14", "data:,", "K034178(2)", "", "http://baidu.com:8081"]
    expected = [identify(s) for s in samples]

    def run(_: int) -> list[list[str]]:
        return [identify(s) for s in samples]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(run, range(64)))
    assert all(r == expected for r in results)
