# site_mapper/report/json_report.py

"""
JSON crawl report for site_mapper.
"""
import json
from pathlib import Path
from site_mapper.aggregator import CrawlReport


def render_json(report: CrawlReport, output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Save *report* as JSON at *output_path*.

    :param report: CrawlReport built from the crawl graph
    :param output_path: path to the JSON file
    :param pretty: indent with two spaces
    :return: Path of the saved file
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(report.as_dict(), f, ensure_ascii=False, indent=2 if pretty else None)

    return output
