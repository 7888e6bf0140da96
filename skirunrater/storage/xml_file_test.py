import pytest
from pydantic import ValidationError

from skirunrater.models import SkiRun
from skirunrater.storage.xml_file import (
    RunFileFormatError,
    create_empty,
    read_runs,
    write_runs,
)


def _write(tmp_path, body):
    p = tmp_path / "runs.xml"
    p.write_text(body, encoding="utf-8")
    return p


def test_read_seeded_file(data_file):
    runs = read_runs(data_file)
    assert [(r.id, r.name, r.vertical) for r in runs] == [
        (1, "Upper Meadow", 1000),
        (2, "Widowmaker", 2000),
    ]


def test_write_then_read_keeps_order_and_values(tmp_path):
    p = tmp_path / "runs.xml"
    runs = [
        SkiRun(id=7, name="Back Bowl & Chutes", vertical=2750),
        SkiRun(id=3, name="", vertical=-5),
        SkiRun(id=7, name="Duplicate id", vertical=10),
    ]
    write_runs(p, runs)
    assert read_runs(p) == runs


def test_written_file_uses_element_per_field(tmp_path):
    p = tmp_path / "runs.xml"
    write_runs(p, [SkiRun(id=1, name="Lift Line", vertical=900)])
    text = p.read_text(encoding="utf-8")
    assert "<SkiRuns>" in text
    assert "<ID>1</ID>" in text
    assert "<Name>Lift Line</Name>" in text
    assert "<Vertical>900</Vertical>" in text


def test_field_order_inside_record_does_not_matter(tmp_path):
    p = _write(tmp_path, "<SkiRuns><SkiRun><Vertical>5</Vertical><Name>x</Name><ID>9</ID></SkiRun></SkiRuns>")
    assert read_runs(p) == [SkiRun(id=9, name="x", vertical=5)]


def test_create_empty(tmp_path):
    p = create_empty(tmp_path / "nested" / "dir" / "SkiRuns.xml")
    assert p.exists()
    assert read_runs(p) == []


def test_missing_file_raises_file_not_found(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_runs(tmp_path / "nope.xml")


@pytest.mark.parametrize("body", [
    "not xml at all",
    "<Runs></Runs>",
    "<SkiRuns><Lift><ID>1</ID></Lift></SkiRuns>",
    "<SkiRuns><SkiRun><ID>1</ID><Name>a</Name></SkiRun></SkiRuns>",
    "<SkiRuns><SkiRun><ID>one</ID><Name>a</Name><Vertical>1</Vertical></SkiRun></SkiRuns>",
    "<SkiRuns><SkiRun><ID>1</ID><Name>a</Name><Vertical>1</Vertical><Rating>5</Rating></SkiRun></SkiRuns>",
    "<SkiRuns><SkiRun><ID>1</ID><ID>2</ID><Name>a</Name><Vertical>1</Vertical></SkiRun></SkiRuns>",
])
def test_malformed_content_fails_whole_load(tmp_path, body):
    p = _write(tmp_path, body)
    with pytest.raises(RunFileFormatError) as exc:
        read_runs(p)
    assert str(p) in str(exc.value)


def test_one_bad_record_among_good_ones_fails(tmp_path):
    p = _write(tmp_path, (
        "<SkiRuns>"
        "<SkiRun><ID>1</ID><Name>ok</Name><Vertical>100</Vertical></SkiRun>"
        "<SkiRun><ID>2</ID><Name>bad</Name><Vertical>tall</Vertical></SkiRun>"
        "</SkiRuns>"
    ))
    with pytest.raises(RunFileFormatError, match="record 1"):
        read_runs(p)


def test_newlines_and_tabs_in_names_round_trip(tmp_path):
    p = tmp_path / "runs.xml"
    runs = [SkiRun(id=1, name="line one\nline\ttwo", vertical=1)]
    write_runs(p, runs)
    assert read_runs(p) == runs


@pytest.mark.parametrize("name", ["bad\x01name", "a\rb", "nul\x00"])
def test_model_rejects_unstorable_names(name):
    with pytest.raises(ValidationError):
        SkiRun(id=1, name=name, vertical=1)


@pytest.mark.parametrize("name", ["bad\x01name", "a\rb"])
def test_write_refuses_unstorable_value_and_keeps_file(data_file, name):
    run = SkiRun(id=3, name="fine", vertical=1)
    run.name = name  # assignment is not validated
    before = data_file.read_bytes()
    with pytest.raises(ValueError, match="record 2"):
        write_runs(data_file, read_runs(data_file) + [run])
    assert data_file.read_bytes() == before
    assert [r.id for r in read_runs(data_file)] == [1, 2]


def test_carriage_return_reference_in_file_is_rejected(tmp_path):
    p = _write(tmp_path, "<SkiRuns><SkiRun><ID>1</ID><Name>a&#13;b</Name><Vertical>1</Vertical></SkiRun></SkiRuns>")
    with pytest.raises(RunFileFormatError, match="record 0"):
        read_runs(p)
