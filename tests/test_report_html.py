# tests/test_report_html.py
"""
HTML validation tests using BeautifulSoup.

- Parses the generated HTML report and asserts the presence of expected rows and metadata.
- Requires beautifulsoup4 in test environment.
"""

import os

from bs4 import BeautifulSoup
from rich.console import Console

from models import Violation
from utils import print_summary_and_report_path, save_report


def sample_violations():
    return [
        Violation("serviceName", "test-service", 'Service name "test-service" should not include the word "service"'),
        Violation("dynamoDBTableName", "db", 'DynamoDB table name "BadTableName" is not kebab case'),
    ]


def test_html_report_contains_violations(tmp_path):
    paths = save_report(sample_violations(), stage="tst", extra={"source": "test"}, out_dir=str(tmp_path))
    html_path = paths["html"]
    assert os.path.exists(html_path)

    with open(html_path, "r", encoding="utf-8") as fh:
        soup = BeautifulSoup(fh, "html.parser")

    header_text = soup.find("h2").get_text(strip=True)
    assert "stage: tst" in header_text
    assert "source: test" in soup.find("ul").get_text()

    table = soup.find("table")
    assert table is not None
    rows = table.find_all("tr")
    assert len(rows) == 3
    found = False
    for tr in rows[1:]:
        cols = [td.get_text(strip=True) for td in tr.find_all("td")]
        if cols and cols[0] == "db":
            assert cols[1] == "dynamoDBTableName"
            assert '"BadTableName"' in cols[2]
            found = True
    assert found


def test_html_report_escapes_names(tmp_path):
    violations = [Violation("handlerName", "<fn>", 'Handler "src/<fn>" does not end in ".handler"')]
    paths = save_report(violations, stage="tst", out_dir=str(tmp_path))
    with open(paths["html"], "r", encoding="utf-8") as fh:
        raw = fh.read()
    assert "<fn>" not in raw
    soup = BeautifulSoup(raw, "html.parser")
    assert soup.find("td").get_text() == "<fn>"


def test_empty_report(tmp_path):
    paths = save_report([], stage="prd", out_dir=str(tmp_path))
    with open(paths["csv"], "r", encoding="utf-8") as fh:
        assert fh.read().strip() == "rule,resource,message"
    with open(paths["html"], "r", encoding="utf-8") as fh:
        soup = BeautifulSoup(fh, "html.parser")
    assert "Total violations: 0" in soup.find("p").get_text()


def test_console_summary(capsys):
    print_summary_and_report_path(
        sample_violations(), {"json": "a.json", "csv": "a.csv", "html": "a.html"}, console=Console(width=200)
    )
    out = capsys.readouterr().out
    assert "Total violations: 2" in out
    assert "dynamoDBTableName" in out
    assert "a.html" in out
