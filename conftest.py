import pytest

SEED_XML = """<?xml version="1.0" encoding="utf-8"?>
<SkiRuns>
  <SkiRun>
    <ID>1</ID>
    <Name>Upper Meadow</Name>
    <Vertical>1000</Vertical>
  </SkiRun>
  <SkiRun>
    <ID>2</ID>
    <Name>Widowmaker</Name>
    <Vertical>2000</Vertical>
  </SkiRun>
</SkiRuns>
"""


@pytest.fixture()
def data_file(tmp_path, monkeypatch):
    """A data file holding runs 1 (1000 ft) and 2 (2000 ft), set as the configured path."""
    p = tmp_path / "SkiRuns.xml"
    p.write_text(SEED_XML, encoding="utf-8")
    monkeypatch.setenv("SKIRUNRATER_DATA_FILE", str(p))
    return p
