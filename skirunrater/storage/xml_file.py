"""XML codec for the ski run data file.

The file holds a single ``SkiRuns`` root with one ``SkiRun`` element per
record, each field stored as a child element::

    <SkiRuns>
      <SkiRun>
        <ID>1</ID>
        <Name>Upper Meadow</Name>
        <Vertical>1000</Vertical>
      </SkiRun>
    </SkiRuns>

Reads are strict: one bad record fails the whole file.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List
from xml.etree import ElementTree as ET

from pydantic import ValidationError

from skirunrater.models import SkiRun, XML_FIELDS, check_storable

ROOT_TAG = "SkiRuns"
RECORD_TAG = "SkiRun"

logger = logging.getLogger(__name__)


class RunFileFormatError(ValueError):
    """The data file exists but does not hold a valid ski run collection."""

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


def _record_fields(path: Path, index: int, element: ET.Element) -> dict:
    if element.tag != RECORD_TAG:
        raise RunFileFormatError(path, f"record {index}: unexpected element <{element.tag}>")
    fields = {}
    for child in element:
        if child.tag not in XML_FIELDS:
            raise RunFileFormatError(path, f"record {index}: unknown field <{child.tag}>")
        if child.tag in fields:
            raise RunFileFormatError(path, f"record {index}: duplicate field <{child.tag}>")
        fields[child.tag] = child.text or ""
    return fields


def read_runs(path: Path) -> List[SkiRun]:
    path = Path(path)
    # FileNotFoundError / PermissionError propagate as-is
    with path.open("rb") as f:
        try:
            root = ET.parse(f).getroot()
        except ET.ParseError as e:
            logger.error("Unparseable data file %s: %s", path, e)
            raise RunFileFormatError(path, f"not well-formed XML ({e})") from e

    if root.tag != ROOT_TAG:
        raise RunFileFormatError(path, f"expected root <{ROOT_TAG}>, found <{root.tag}>")

    runs = []
    for index, element in enumerate(root):
        fields = _record_fields(path, index, element)
        try:
            runs.append(SkiRun.model_validate(fields))
        except ValidationError as e:
            logger.error("Invalid record %d in %s", index, path)
            raise RunFileFormatError(path, f"record {index}: {e}") from e

    logger.debug("Read %d runs from %s", len(runs), path)
    return runs


def _build_tree(runs: Iterable[SkiRun]) -> ET.ElementTree:
    root = ET.Element(ROOT_TAG)
    for index, run in enumerate(runs):
        element = ET.SubElement(root, RECORD_TAG)
        values = run.model_dump(by_alias=True)
        for tag in XML_FIELDS:
            text = str(values[tag])
            try:
                check_storable(text)
            except ValueError as e:
                raise ValueError(f"record {index} (id={run.id}) <{tag}>: {e}") from e
            ET.SubElement(element, tag).text = text
    ET.indent(root)
    return ET.ElementTree(root)


def write_runs(path: Path, runs: Iterable[SkiRun]) -> None:
    """Overwrite ``path`` with ``runs``. Plain truncate-and-write, no temp file.

    Raises ValueError before touching the file if a value cannot be stored.
    """
    path = Path(path)
    tree = _build_tree(runs)
    with path.open("wb") as f:
        tree.write(f, encoding="utf-8", xml_declaration=True)
    logger.debug("Wrote %d runs to %s", len(tree.getroot()), path)


def create_empty(path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    write_runs(path, [])
    return path
