from regex_collection.config import load_config


def test_default_values() -> None:
    cfg = load_config(env={})
    assert cfg.schema_version == 1
    assert cfg.logging.level == "WARNING"
    assert cfg.logging.level_env == "REGEX_COLLECTION_LOG_LEVEL"
    assert cfg.input.strip_whitespace is True
    assert cfg.input.skip_blank is True
    assert cfg.identify.categories == []
