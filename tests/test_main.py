import pytest
from conftest import StubResolver, registered

from hipster_domains import main as main_mod
from hipster_domains.config import Settings
from hipster_domains.errors import FatalInputError


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words"
    path.write_text("radio\ndata\napple\n")
    return path


@pytest.fixture
def fake_tlds(monkeypatch):
    fetched = []

    async def fetch(url, timeout=30.0):
        fetched.append(url)
        return ["io", "a", "ta", "com"]

    monkeypatch.setattr(main_mod, "fetch_tlds", fetch)
    return fetched


async def test_run_end_to_end(words_file, fake_tlds, handler):
    cfg = Settings(words_path=str(words_file), tld_url="https://tlds.test/", workers=2)
    resolver = StubResolver({"da.ta": registered("da.ta")})

    stats = await main_mod.run(cfg, resolver=resolver, handler=handler)

    assert fake_tlds == ["https://tlds.test/"]
    assert sorted(handler.unregistered) == ["dat.a", "rad.io"]
    assert stats.candidates_generated == 3
    assert stats.registered == 1


async def test_missing_words_aborts_before_lookups(tmp_path, fake_tlds, handler):
    cfg = Settings(words_path=str(tmp_path / "missing"), workers=2)
    resolver = StubResolver()

    with pytest.raises(FatalInputError):
        await main_mod.run(cfg, resolver=resolver, handler=handler)
    assert resolver.calls == []
    assert handler.unregistered == []


def test_main_reports_fatal_error(monkeypatch, capsys):
    async def failing_run():
        raise FatalInputError("TLD list", "503 Service Unavailable")

    monkeypatch.setattr(main_mod, "run", failing_run)
    monkeypatch.setattr(main_mod, "setup_logging", lambda: None)
    with pytest.raises(SystemExit) as exc_info:
        main_mod.main()
    assert exc_info.value.code == 1
    assert "Could not get TLD list: 503 Service Unavailable" in capsys.readouterr().err


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("HIPSTER_DOMAINS_WORKERS", "7")
    monkeypatch.setenv("HIPSTER_DOMAINS_ALLOW_EMPTY_LABEL", "true")
    cfg = Settings()
    assert cfg.workers == 7
    assert cfg.allow_empty_label is True
