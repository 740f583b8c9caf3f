import pytest

SAMPLE_CARD = """
<div class='x1__pJ'>
    <h3><span>Model XYZ123</span></h3>
    <span class='I7_YA7'>(ABC123)</span>
    <span class='_2_gOH8'>£2,999.99 Inc Vat</span>
    <div title='Product rating 4 stars out of 5' class='vQBT0O'></div>
    <span aria-hidden='true'>(15)</span>
    <ul class='z_Eq10'>
        <li>Feature 1</li>
        <li>Feature 2</li>
        <li>10 Year Guarantee</li>
    </ul>
    <div class='BPu2wi'></div>
</div>
"""

BARE_CARD = """
<div class='x1__pJ'>
    <h3><span>Model Bare</span></h3>
</div>
"""

CSV_HEADER = "Model,ProductCode,Manufacturer,Price (inc VAT),Rating,ReviewCount,Features,IsEnergyEfficient,Guarantee\n"


class StubFetcher:
    """Returns canned HTML, or raises the given error"""

    def __init__(self, html="", error=None):
        self.html = html
        self.error = error
        self.urls = []
        self.closed = False

    def fetch(self, url):
        self.urls.append(url)
        if self.error:
            raise self.error
        return self.html

    def close(self):
        self.closed = True


@pytest.fixture
def sample_html():
    return f"<html><body>{SAMPLE_CARD}</body></html>"


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV text (header added) to a temp file and return its path"""
    def _write(body, name="history.csv"):
        path = tmp_path / name
        path.write_text(CSV_HEADER + body, encoding="utf-8")
        return path
    return _write
