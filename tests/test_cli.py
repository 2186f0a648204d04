"""CLI tests using click.testing.CliRunner.
Cover the `crawl` and `config` commands, `--version` and error handling.
"""
import json

import pytest
import site_mapper.cli as cli_module
from click.testing import CliRunner
from site_mapper.aggregator import CrawlReport
from site_mapper.cli import cli
from site_mapper.logger import init_logging


@pytest.fixture(autouse=True)
def restore_logging():
    """The CLI rebinds the project logger to CliRunner's streams."""
    yield
    init_logging()


@pytest.fixture()
def calls():
    return []


@pytest.fixture(autouse=True)
def patch_start_crawl(monkeypatch, calls):
    """Replace start_crawl with a canned report, no network access."""

    async def fake_crawl(cfg):
        calls.append(cfg)
        return CrawlReport(
            pages=[{"url": "/", "title": "Home", "referrers": []}],
            errors=[{"url": "/broken", "error": "Status: 404", "referrers": ["/"]}],
        )

    monkeypatch.setattr(cli_module, "start_crawl", fake_crawl)


@pytest.fixture()
def cfg_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"checkHost": "http://127.0.0.1:3000", "paths": ["/"], "blackList": ["/#/"]}),
        encoding="utf-8",
    )
    return path


def test_version_option():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "site_mapper" in result.output


def test_show_config(cfg_file):
    result = CliRunner().invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["checkHost"] == "http://127.0.0.1:3000"
    assert data["outputHost"] == "http://127.0.0.1:3000"
    assert data["blackList"] == ["/#/"]


def test_missing_config(tmp_path):
    result = CliRunner().invoke(cli, ["--config", str(tmp_path / "absent.yaml"), "config"])
    assert result.exit_code == 1
    assert "Failed to load configuration" in result.output


def test_crawl_stdout(cfg_file):
    result = CliRunner().invoke(cli, ["--config", str(cfg_file), "crawl"])
    assert result.exit_code == 0
    output = json.loads(result.output)
    assert output["pages"][0]["url"] == "/"


def test_crawl_overrides(cfg_file, calls, tmp_path):
    sitemap = tmp_path / "out" / "sitemap.xml"
    result = CliRunner().invoke(
        cli, ["--config", str(cfg_file), "crawl", "--sitemap", str(sitemap), "--check-external"]
    )
    assert result.exit_code == 0
    (cfg,) = calls
    assert cfg.sitemap_path == sitemap
    assert cfg.check_external_links is True


def test_crawl_reports(cfg_file, tmp_path):
    json_out = tmp_path / "report.json"
    html_out = tmp_path / "report.html"
    result = CliRunner().invoke(
        cli, ["--config", str(cfg_file), "crawl", "--json", str(json_out), "--html", str(html_out)]
    )
    assert result.exit_code == 0
    assert json.loads(json_out.read_text(encoding="utf-8"))["errors"][0]["url"] == "/broken"
    assert "/broken" in html_out.read_text(encoding="utf-8")


def test_fail_on_error(cfg_file):
    result = CliRunner().invoke(cli, ["--config", str(cfg_file), "crawl", "--fail-on-error"])
    assert result.exit_code == 1
    assert "1 page(s) failed" in result.output


def test_crawl_failure(cfg_file, monkeypatch):
    async def broken(cfg):
        raise OSError("disk full")

    monkeypatch.setattr(cli_module, "start_crawl", broken)
    result = CliRunner().invoke(cli, ["--config", str(cfg_file), "crawl"])
    assert result.exit_code == 1
    assert "Crawl failed: disk full" in result.output
