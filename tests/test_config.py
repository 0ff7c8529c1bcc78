from config import Settings


def test_defaults(monkeypatch):
    for var in ("SEMTEXT_ENTITY_PREFIX", "SEMTEXT_CONCEPT_PREFIX", "SEMTEXT_DISI_BASE_URL", "SEMTEXT_DISAMBIGUATION_MARGIN"):
        monkeypatch.delenv(var, raising=False)
    cfg = Settings(_env_file=None)
    assert cfg.entity_prefix == ""
    assert cfg.concept_prefix == ""
    assert cfg.disi_base_url == "http://localhost"
    assert abs(cfg.disambiguation_margin - 1.0 / 6.0) < 1e-12


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SEMTEXT_ENTITY_PREFIX", "http://mysite.org/entities/")
    monkeypatch.setenv("SEMTEXT_DISAMBIGUATION_MARGIN", "0.25")
    cfg = Settings(_env_file=None)
    assert cfg.entity_prefix == "http://mysite.org/entities/"
    assert cfg.disambiguation_margin == 0.25
