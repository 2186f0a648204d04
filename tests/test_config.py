# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError
from site_mapper.config import CrawlerConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("checkHost: http://example.com\npaths: ['/']", ".yaml", None),
        (json.dumps({"check_host": "http://example.com", "paths": ["/"]}), ".json", None),
        ("{}", ".json", ValidationError),
        ("checkHost: http://example.com\npaths: []", ".yaml", ValidationError),
        ("checkHost: ftp://example.com\npaths: ['/']", ".yaml", ValidationError),
        ("checkHost: http://example.com\npaths: ['/']\nmaxDepth: 3", ".yaml", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("- just\n- a list", ".yaml", TypeError),
        ("{broken", ".json", ValueError),
        ("check_host = 'http://example.com'", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, CrawlerConfig)
        assert cfg.check_host == "http://example.com"
        assert cfg.output_host == "http://example.com"


def test_defaults():
    cfg = CrawlerConfig(check_host="http://h", paths=["/"])
    assert cfg.black_list == []
    assert cfg.check_external_links is False
    assert cfg.sitemap_path is None
    assert cfg.timeout == 10.0
    assert cfg.settle_delay == 0.5


def test_camel_case_keys(tmp_path):
    cfg_path = write_file(
        tmp_path,
        "\n".join(
            [
                "checkHost: http://127.0.0.1:3000",
                "outputHost: https://bugfire.dev",
                "paths: ['/']",
                "blackList: ['/#/']",
                "checkExternalLinks: true",
                "sitemapPath: build/sitemap.xml",
            ]
        ),
        ".yml",
    )
    cfg = load_config(cfg_path)
    assert cfg.check_host == "http://127.0.0.1:3000"
    assert cfg.output_host == "https://bugfire.dev"
    assert cfg.black_list == ["/#/"]
    assert cfg.check_external_links is True
    assert cfg.sitemap_path == Path("build/sitemap.xml")


def test_config_is_frozen():
    cfg = CrawlerConfig(check_host="http://h", paths=["/"])
    with pytest.raises(ValidationError):
        cfg.timeout = 1.0


def test_load_config_default_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        load_config(None)


def test_load_config_default_present(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("checkHost: http://h\npaths: ['/']", encoding="utf-8")
    assert load_config(None).check_host == "http://h"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_hosts_kept_verbatim():
    cfg = CrawlerConfig(checkHost="http://h/", outputHost="https://site.example/", paths=[""])
    assert cfg.check_host == "http://h/"
    assert cfg.output_host == "https://site.example/"
    assert CrawlerConfig(check_host="http://h/", paths=["/"]).output_host == "http://h/"


def test_empty_output_host_is_kept():
    cfg = CrawlerConfig(check_host="http://h", output_host="", paths=["/"])
    assert cfg.output_host == ""
